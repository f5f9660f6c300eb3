"""
Terminal module for TicTacToe.
Handles reading moves, drawing the board and running the game loop.
"""

from .config import ConsoleConfig
from .input_parser import parse_move, is_quit_command, MoveParseError
from .renderer import BoardRenderer
from .screen import clear_screen
from .session import ConsoleGame
