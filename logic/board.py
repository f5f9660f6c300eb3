"""
Board model for terminal TicTacToe.
A Board is an immutable 3x3 snapshot; placing a mark returns a new Board.
"""

from enum import Enum
from typing import Iterable, List, Sequence, Tuple

import numpy as np


BOARD_SIZE = 3

# Cell value for an empty square
EMPTY = " "


class Mark(Enum):
    """The two player symbols."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        return Mark.O if self == Mark.X else Mark.X


# X always moves first
FIRST_MARK = Mark.X

CELL_VALUES = (EMPTY, Mark.X.value, Mark.O.value)


class Board:
    """
    A 3x3 grid of cells: " " (empty), "X" or "O".

    The underlying numpy array is marked read-only, so a Board handed
    out earlier in the game keeps showing the position it was created with.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: np.ndarray):
        raw = np.asarray(cells)
        if raw.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {raw.shape}")
        # Checked before the "<U1" cast, which would truncate "XO" to "X"
        if raw.dtype.kind not in ("U", "O") or not np.isin(raw, CELL_VALUES).all():
            raise ValueError(f"Board cells must be one of {CELL_VALUES}")

        cells = np.array(raw, dtype="<U1", copy=True)
        cells.setflags(write=False)
        self._cells = cells

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Board":
        """
        Build a board from nested rows of cell characters.

        Args:
            rows: Three rows of three cells, each " ", "X" or "O".

        Returns:
            A new Board.
        """
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError("Board rows must be exactly 3x3")

        values = []
        for row in rows:
            for cell in row:
                value = cell.value if isinstance(cell, Mark) else cell
                if value not in CELL_VALUES:
                    raise ValueError(f"Invalid cell value: {cell!r}")
                values.append(value)

        return cls(np.array(values, dtype="<U1").reshape(BOARD_SIZE, BOARD_SIZE))

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the grid."""
        return self._cells

    def __getitem__(self, position: Tuple[int, int]) -> str:
        row, col = position
        return str(self._cells[row, col])

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __repr__(self) -> str:
        return f"Board({self.rows()!r})"

    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        """Get the board as nested tuples of cell characters."""
        return tuple(tuple(str(cell) for cell in row) for row in self._cells)

    def with_mark(self, row: int, col: int, mark: Mark) -> "Board":
        """
        Copy the board with one cell set.
        No rule checks happen here; use apply_move for that.
        """
        cells = self._cells.copy()
        cells[row, col] = mark.value
        return Board(cells)

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        return [(int(row), int(col)) for row, col in np.argwhere(self._cells == EMPTY)]

    def filled_count(self) -> int:
        """Number of non-empty cells (0-9)."""
        return int(np.count_nonzero(self._cells != EMPTY))

    def is_full(self) -> bool:
        return not np.any(self._cells == EMPTY)

    def cells_at(self, positions: Iterable[Tuple[int, int]]) -> List[str]:
        """Get the cell values at several positions."""
        return [self[position] for position in positions]


def new_board() -> Board:
    """Create a board with every cell empty."""
    return Board(np.full((BOARD_SIZE, BOARD_SIZE), EMPTY, dtype="<U1"))
