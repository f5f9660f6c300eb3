"""
Parses a typed move such as "2 3" into zero-based (row, col).
"""

from typing import Optional, Tuple

from .config import ConsoleConfig


class MoveParseError(ValueError):
    """The input line is not two whitespace-separated integers."""


def parse_move(line: str) -> Tuple[int, int]:
    """
    Parse one line of input into a move.

    Args:
        line: Text like "1 3". Numbers are 1-based.

    Returns:
        (row, col), zero-based. The range is not checked here.

    Raises:
        MoveParseError: wrong number of tokens or a token is not an integer.
    """
    tokens = line.split()
    if len(tokens) != 2:
        raise MoveParseError(
            f"Expected two numbers separated by a space, got {len(tokens)} value(s)."
        )

    try:
        row, col = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise MoveParseError(f"Row and column must be whole numbers, got {line.strip()!r}.") from None

    return row - 1, col - 1


def is_quit_command(line: str, config: Optional[ConsoleConfig] = None) -> bool:
    config = config or ConsoleConfig()
    return line.strip().lower() in config.QUIT_COMMANDS
