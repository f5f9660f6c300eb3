"""
Move validator for terminal TicTacToe.
Checks that moves follow the rules and applies them to a board snapshot.
"""

import logging
import numbers
from typing import Optional, Tuple, List, Union
from dataclasses import dataclass

import numpy as np

from .board import Board, Mark, EMPTY, BOARD_SIZE
from .errors import InvalidMarkError, OutOfBoundsError, CellOccupiedError

logger = logging.getLogger(__name__)


def _is_coordinate(value) -> bool:
    # numpy integers count; bools are ints but not coordinates
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def _in_bounds(row, col) -> bool:
    return (
        _is_coordinate(row) and _is_coordinate(col)
        and 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE
    )


def is_valid_move(board: Board, row: int, col: int) -> bool:
    """
    Check whether a mark may be placed at (row, col).

    Out-of-range coordinates are simply invalid; the bounds check runs
    before any cell lookup.
    """
    if not _in_bounds(row, col):
        return False
    return board[row, col] == EMPTY


def _coerce_mark(mark: Union[Mark, str]) -> Mark:
    if isinstance(mark, Mark):
        return mark
    if isinstance(mark, str):
        try:
            return Mark(mark)
        except ValueError:
            pass
    raise InvalidMarkError(mark)


def apply_move(board: Board, row: int, col: int, mark: Union[Mark, str]) -> Board:
    """
    Place a mark and return the resulting board.

    Args:
        board: Board snapshot to play on. It is never modified.
        row: Row index (0-2).
        col: Column index (0-2).
        mark: Mark.X / Mark.O, or "X" / "O".

    Returns:
        A new Board with the mark placed.

    Raises:
        InvalidMarkError: mark is not X or O.
        OutOfBoundsError: row or col outside 0-2.
        CellOccupiedError: the cell already holds a mark.
    """
    mark = _coerce_mark(mark)

    if not _in_bounds(row, col):
        logger.debug("Rejected %s at (%s, %s): out of bounds", mark.value, row, col)
        raise OutOfBoundsError(row, col)

    if board[row, col] != EMPTY:
        logger.debug("Rejected %s at (%s, %s): occupied", mark.value, row, col)
        raise CellOccupiedError(row, col, board[row, col])

    return board.with_mark(row, col, mark)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves and explains why a move is rejected.

    Rules:
    1. Row and column must both be 0-2
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message. Messages are
            meant for the player, so they count rows and columns from 1.
        """
        if not _in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error_message="Row and column must be between 1 and 3."
            )

        if not is_valid_move(board, row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row + 1}, {col + 1}) is already taken by {board[row, col]}."
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[Tuple[int, int]]:
        """
        Get all valid moves on a board.

        Returns:
            List of (row, col) valid move positions.
        """
        return board.empty_cells()
