"""
Main CLI for the Reversi board.
"""

import argparse
import logging
import re
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core import SIZE
from ..core.board import column_label
from ..core.errors import ReversiError
from ..game import GameController
from ..utils.messages import DEFAULT_LANG, SUPPORTED_LANGS, Messages
from ..utils.rich_display import BoardDisplay, setup_rich_logging

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Enter a move as a column letter and row number (d3) or as 1-based "
    "row and column (3 4). Other commands: moves, reset, help, quit."
)

_LETTER_NUMBER = re.compile(r"^([a-h])\s*([1-8])$")
_NUMBER_NUMBER = re.compile(r"^([1-8])[\s,]+([1-8])$")


@dataclass(frozen=True)
class GameConfig:
    """Options for an interactive session."""

    lang: str = DEFAULT_LANG
    strict: bool = False
    log_level: str = "WARNING"


def parse_coordinate(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse a board coordinate typed by the user.

    Args:
        text: "d3" (column letter, row number) or "3 4" (row, column), 1-based

    Returns:
        0-based (row, col), or None if the text is not a coordinate
    """
    text = text.strip().lower()

    match = _LETTER_NUMBER.match(text)
    if match:
        return int(match.group(2)) - 1, ord(match.group(1)) - ord("a")

    match = _NUMBER_NUMBER.match(text)
    if match:
        return int(match.group(1)) - 1, int(match.group(2)) - 1

    return None


def format_coordinate(row: int, col: int) -> str:
    return f"{column_label(col)}{row + 1}"


def handle_command(game: GameController, display: BoardDisplay, text: str) -> bool:
    """
    Run one line of user input against the game.

    Returns:
        False when the user asked to quit, True otherwise
    """
    command = text.strip().lower()

    if command in ("q", "quit", "exit"):
        return False
    if command in ("", "help", "?"):
        display.console.print(HELP_TEXT)
    elif command == "reset":
        game.reset()
    elif command == "moves":
        moves = ", ".join(format_coordinate(row, col) for row, col in game.legal_moves)
        display.console.print(moves or "-")
    else:
        position = parse_coordinate(command)
        if position is None:
            display.log_error(f"Unknown command {text.strip()!r}")
            return True
        try:
            accepted = game.submit_move(*position)
        except ReversiError as e:
            display.log_error(str(e))
            return True
        if not accepted:
            display.log_error(f"{format_coordinate(*position)} is not playable")

    return True


def play_command(args):
    """Play an interactive two-player game."""
    config = GameConfig(lang=args.lang, strict=args.strict, log_level=args.log_level)
    setup_rich_logging(config.log_level)

    display = BoardDisplay(messages=Messages(config.lang))
    game = GameController(strict=config.strict)
    game.add_listener(display.render)

    logger.info(f"Starting game (lang={config.lang}, strict={config.strict})")
    display.render(game)
    display.console.print(HELP_TEXT)

    while True:
        try:
            line = display.console.input("> ")
        except (EOFError, KeyboardInterrupt):
            display.console.print()
            break
        if not handle_command(game, display, line):
            break


def show_command(args):
    """Print the starting position with Black's legal moves."""
    setup_rich_logging(args.log_level)
    display = BoardDisplay(messages=Messages(args.lang))
    game = GameController()
    display.render(game)
    display.console.print(", ".join(format_coordinate(row, col) for row, col in game.legal_moves))


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description=f"Reversi on a {SIZE}x{SIZE} board")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a two-player game in the terminal")
    play_parser.add_argument(
        "--lang", default=DEFAULT_LANG, choices=SUPPORTED_LANGS, help="Message language"
    )
    play_parser.add_argument(
        "--strict", action="store_true", help="Report rule violations as errors"
    )
    play_parser.set_defaults(func=play_command)

    # Show command
    show_parser = subparsers.add_parser("show", help="Show the starting position")
    show_parser.add_argument(
        "--lang", default=DEFAULT_LANG, choices=SUPPORTED_LANGS, help="Message language"
    )
    show_parser.set_defaults(func=show_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
