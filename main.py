"""
Main entry point for terminal TicTacToe.

Two players take turns at one keyboard:
- X always moves first
- Moves are typed as "row col", both 1-3
- The game ends on three in a row or a full board

Run this script to play!
"""

import argparse
import logging
import sys

from colorama import just_fix_windows_console

from terminal.config import ConsoleConfig
from terminal.session import ConsoleGame


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Terminal TicTacToe")
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Draw the board without ANSI colors"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen between turns"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics (written to stderr)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = ConsoleConfig(
        USE_COLOR=not args.no_color,
        CLEAR_SCREEN=not args.no_clear,
    )
    if config.USE_COLOR:
        just_fix_windows_console()

    game = ConsoleGame(config)

    try:
        return game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        print("Goodbye!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
