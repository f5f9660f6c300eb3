"""
Board renderer for the terminal.
Draws a board snapshot as a box-drawn grid, optionally with ANSI colors.
"""

from typing import Optional, List, Tuple

from colorama import Style

from logic.board import Board, BOARD_SIZE, EMPTY
from .config import ConsoleConfig


class BoardRenderer:
    """
    Turns a Board into printable text.

    The last move is passed in by the caller on every render; the renderer
    keeps no state between calls.
    """

    def __init__(self, config: Optional[ConsoleConfig] = None):
        self.config = config or ConsoleConfig()

    def render(
        self,
        board: Board,
        last_move: Optional[Tuple[int, int]] = None,
        winning_line: Optional[List[Tuple[int, int]]] = None,
    ) -> str:
        """
        Render the board.

        Args:
            board: Board snapshot to draw.
            last_move: (row, col) of the most recent move, highlighted.
            winning_line: Cells of a completed line, highlighted.

        Returns:
            The board as a multi-line string. Rows and columns are labelled 1-3.
        """
        winning_cells = set(winning_line or [])

        lines = ["    " + "   ".join(str(col + 1) for col in range(BOARD_SIZE))]
        lines.append("  ┌───┬───┬───┐")

        for row in range(BOARD_SIZE):
            cells = [
                self._render_cell(
                    board[row, col],
                    is_last=(row, col) == last_move,
                    is_winning=(row, col) in winning_cells,
                )
                for col in range(BOARD_SIZE)
            ]
            lines.append(f"{row + 1} │" + "│".join(cells) + "│")

            if row < BOARD_SIZE - 1:
                lines.append("  ├───┼───┼───┤")

        lines.append("  └───┴───┴───┘")
        return "\n".join(lines)

    def _render_cell(self, cell: str, is_last: bool, is_winning: bool) -> str:
        if not self.config.USE_COLOR:
            # Brackets stand in for highlighting
            if cell != EMPTY and (is_last or is_winning):
                return f"[{cell}]"
            return f" {cell} "

        if cell == EMPTY:
            return "   "

        style = self.config.MARK_COLORS.get(cell, "")
        if is_winning:
            style += self.config.WINNING_LINE_STYLE
        elif is_last:
            style += self.config.LAST_MOVE_STYLE
        return f"{style} {cell} {Style.RESET_ALL}"

    def colorize_error(self, message: str) -> str:
        if not self.config.USE_COLOR:
            return message
        return f"{self.config.ERROR_COLOR}{message}{Style.RESET_ALL}"
