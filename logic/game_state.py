"""
Game state management for terminal TicTacToe.
Tracks the board snapshots, current player and move history.
"""

import logging
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .board import Board, Mark, FIRST_MARK, new_board
from .errors import GameOverError
from .move_validator import apply_move
from .win_checker import WinChecker, GameStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (1-9)


@dataclass
class GameState:
    """
    The state of one TicTacToe game.

    Tracks:
    - The current board snapshot, plus every earlier one
    - Current player
    - Move history and the last move (for highlighting)
    - Game status (ongoing, won, draw)
    """

    board: Board = field(default_factory=new_board)

    # Current player's turn
    current_player: Mark = FIRST_MARK

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Every snapshot so far, oldest first
    boards: List[Board] = field(default_factory=list)

    # Game result
    winner: Optional[Mark] = None
    is_draw: bool = False
    is_game_over: bool = False

    win_checker: WinChecker = field(default_factory=WinChecker, repr=False, compare=False)

    def __post_init__(self):
        if not self.boards:
            self.boards.append(self.board)

    @property
    def last_move(self) -> Optional[Tuple[int, int]]:
        """(row, col) of the most recent move, or None before the first move."""
        if not self.moves:
            return None
        move = self.moves[-1]
        return move.row, move.col

    @property
    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        if self.winner is None:
            return None
        return self.win_checker.get_winning_line(self.board, self.winner)

    def make_move(self, row: int, col: int) -> Move:
        """
        Place the current player's mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The recorded Move.

        Raises:
            GameOverError: the game has already ended.
            IllegalMoveError: the position is out of range or taken.
        """
        if self.is_game_over:
            raise GameOverError()

        mark = self.current_player
        # Raises before anything is recorded, so a rejected move changes nothing
        self.board = apply_move(self.board, row, col, mark)
        self.boards.append(self.board)

        move = Move(mark=mark, row=row, col=col, move_number=len(self.moves) + 1)
        self.moves.append(move)
        logger.debug("Move %d: %s at (%d, %d)", move.move_number, mark.value, row, col)

        # Check the mark that just played, before switching turns
        status = self.win_checker.evaluate(self.board, mark)
        if status is GameStatus.WON:
            self.winner = mark
            self.is_game_over = True
            logger.info("%s wins after %d moves", mark.value, len(self.moves))
        elif status is GameStatus.DRAW:
            self.is_draw = True
            self.is_game_over = True
            logger.info("Draw after %d moves", len(self.moves))
        else:
            self.current_player = mark.opposite()

        return move

    def copy(self) -> "GameState":
        """Create a copy of the game state. Board snapshots are shared."""
        return GameState(
            board=self.board,
            current_player=self.current_player,
            moves=list(self.moves),
            boards=list(self.boards),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over,
        )
