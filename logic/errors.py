"""
Exceptions raised by the TicTacToe rules.
"""


class GameError(Exception):
    """Base class for all game rule errors."""


class InvalidMarkError(GameError):
    """A move was attempted with something other than X or O."""

    def __init__(self, mark):
        self.mark = mark
        super().__init__(f"Invalid mark {mark!r}. Must be 'X' or 'O'.")


class IllegalMoveError(GameError):
    """The target cell is out of bounds or already occupied."""

    def __init__(self, row, col, message=None):
        self.row = row
        self.col = col
        super().__init__(message or f"Illegal move at ({row}, {col})")


class OutOfBoundsError(IllegalMoveError):
    def __init__(self, row, col):
        super().__init__(row, col, f"Invalid position ({row}, {col}). Must be 0-2.")


class CellOccupiedError(IllegalMoveError):
    def __init__(self, row, col, occupant):
        self.occupant = occupant
        super().__init__(row, col, f"Cell ({row}, {col}) is already occupied by {occupant}")


class GameOverError(GameError):
    """A move was requested after the game ended."""

    def __init__(self):
        super().__init__("Game is already over!")
