"""
Win checker for terminal TicTacToe.
Checks if a player has won or if the board is full.
"""

from enum import Enum
from typing import Optional, List, Tuple

from .board import Board, Mark


# All possible winning lines (as list of (row, col) tuples)
WINNING_LINES = [
    # Rows
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    # Columns
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    # Diagonals
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]


class GameStatus(Enum):
    """Where a game stands after a move."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


def _line_owned_by(board: Board, line: List[Tuple[int, int]], mark: Mark) -> bool:
    return all(cell == mark.value for cell in board.cells_at(line))


def check_win(board: Board, mark: Mark) -> bool:
    """True if all three cells of at least one line hold mark."""
    return any(_line_owned_by(board, line, mark) for line in WINNING_LINES)


def check_draw(board: Board) -> bool:
    """
    True if every cell is filled.

    This does not look for a winner. Check both marks with check_win
    first; a full board with a completed line is a win, not a draw.
    """
    return board.is_full()


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Both marks are checked independently.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        for mark in Mark:
            if check_win(board, mark):
                return mark
        return None

    def get_winning_line(self, board: Board, mark: Mark) -> Optional[List[Tuple[int, int]]]:
        """
        Get the line that mark completed, if any.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            if _line_owned_by(board, line, mark):
                return line
        return None

    def evaluate(self, board: Board, mark: Mark) -> GameStatus:
        """
        Status of the game right after mark has played.
        Win is checked before draw.
        """
        if check_win(board, mark):
            return GameStatus.WON
        if check_draw(board):
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS
