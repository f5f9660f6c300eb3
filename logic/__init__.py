"""
Logic module for terminal TicTacToe.
Handles the board, move rules and win/draw detection.
"""

from .board import Board, Mark, EMPTY, FIRST_MARK, new_board
from .errors import (
    GameError,
    InvalidMarkError,
    IllegalMoveError,
    OutOfBoundsError,
    CellOccupiedError,
    GameOverError,
)
from .move_validator import MoveValidator, ValidationResult, is_valid_move, apply_move
from .win_checker import WinChecker, GameStatus, WINNING_LINES, check_win, check_draw
from .game_state import GameState, Move

__version__ = "1.0.0"
