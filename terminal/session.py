"""
Console game loop for TicTacToe.

Flow for each turn:
1. Draw the board (last move highlighted)
2. Read a move for the current mark
3. Parse and validate it, re-prompting on bad input
4. Apply it and check for a win or draw
5. After the game, offer a rematch
"""

import logging
from typing import Callable, Optional

from logic.game_state import GameState
from logic.move_validator import MoveValidator
from logic.errors import IllegalMoveError
from .config import ConsoleConfig
from .input_parser import parse_move, is_quit_command, MoveParseError
from .renderer import BoardRenderer
from .screen import clear_screen

logger = logging.getLogger(__name__)


class ConsoleGame:
    """
    Two players sharing one terminal.

    input_func and output_func default to input() and print(); tests pass
    their own to script a session.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ):
        self.config = config or ConsoleConfig()
        self.input = input_func
        self.output = output_func

        self.renderer = BoardRenderer(self.config)
        self.validator = MoveValidator()
        self.game_state = GameState()
        self.games_played = 0

    def run(self) -> int:
        """
        Play rounds until the player declines a rematch or quits.

        Returns:
            Process exit code.
        """
        while True:
            if not self.play_round():
                break
            if not self.ask_restart():
                break

        self.output("Goodbye!")
        return 0

    def play_round(self) -> bool:
        """
        Play one game to the end.

        Returns:
            False if the player quit (or input ran out) mid-game.
        """
        self.game_state = GameState()
        message = None

        while not self.game_state.is_game_over:
            self._draw(message)
            message = None

            prompt = self.config.MOVE_PROMPT.format(mark=self.game_state.current_player.value)
            line = self._read(prompt)
            if line is None or is_quit_command(line, self.config):
                return False

            message = self._process_move(line)

        self.games_played += 1
        self._show_game_result()
        return True

    def ask_restart(self) -> bool:
        """Ask whether to play again. Unrecognised answers are asked again."""
        while True:
            line = self._read(self.config.RESTART_PROMPT)
            if line is None:
                return False

            answer = line.strip().lower()
            if answer in self.config.YES_ANSWERS:
                return True
            if answer in self.config.NO_ANSWERS or answer in self.config.QUIT_COMMANDS:
                return False

            self.output(self.renderer.colorize_error("Please answer y or n."))

    def _process_move(self, line: str) -> Optional[str]:
        """
        Parse and play one typed move.

        Returns:
            An error message to show with the next prompt, or None.
        """
        try:
            row, col = parse_move(line)
        except MoveParseError as e:
            logger.debug("Could not parse %r: %s", line, e)
            return str(e)

        result = self.validator.validate_move(self.game_state.board, row, col)
        if not result.is_valid:
            return result.error_message

        try:
            self.game_state.make_move(row, col)
        except IllegalMoveError as e:
            # validate_move already passed, so this is a rules bug
            logger.error("Move rejected after validation: %s", e)
            return str(e)

        return None

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self.input(prompt)
        except EOFError:
            logger.debug("Input closed")
            return None

    def _draw(self, message: Optional[str] = None):
        if self.config.CLEAR_SCREEN:
            clear_screen()

        self.output(self.renderer.render(
            self.game_state.board,
            last_move=self.game_state.last_move,
        ))

        if message:
            self.output(self.renderer.colorize_error(message))

    def _show_game_result(self):
        """Show the final board and result."""
        if self.config.CLEAR_SCREEN:
            clear_screen()

        self.output(self.renderer.render(
            self.game_state.board,
            last_move=self.game_state.last_move,
            winning_line=self.game_state.winning_line,
        ))

        if self.game_state.winner:
            self.output(f"Player {self.game_state.winner.value} wins!")
        else:
            self.output("It's a draw!")
