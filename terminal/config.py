"""
Terminal configuration for TicTacToe.
Colors, prompts and screen handling for the console game.
"""

from colorama import Fore, Back, Style


class ConsoleConfig:
    """
    Configuration class for console settings.
    Class attributes are the defaults; pass keyword arguments to override
    them for one instance.
    """

    # ==================== DISPLAY SETTINGS ====================
    USE_COLOR = True        # ANSI colors (colorama translates them on Windows)
    CLEAR_SCREEN = True     # Clear the terminal before drawing each turn

    # Color for each mark
    MARK_COLORS = {
        "X": Fore.RED,
        "O": Fore.CYAN,
    }

    # Most recently placed mark
    LAST_MOVE_STYLE = Style.BRIGHT + Back.WHITE

    # Cells of the completed line when someone wins
    WINNING_LINE_STYLE = Style.BRIGHT + Back.GREEN

    ERROR_COLOR = Fore.YELLOW

    # ==================== INPUT SETTINGS ====================
    MOVE_PROMPT = "Player {mark}, enter row and column (1-3, e.g. '2 3'): "
    RESTART_PROMPT = "Play again? (y/n): "

    # Words that end the session at any prompt
    QUIT_COMMANDS = ("q", "quit", "exit")

    YES_ANSWERS = ("y", "yes")
    NO_ANSWERS = ("n", "no")

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not hasattr(type(self), name):
                raise AttributeError(f"Unknown console setting: {name}")
            setattr(self, name, value)
