"""
Rich-based terminal board.

Draws a GameController as:
- An 8x8 grid with a-h / 1-8 labels
- Discs, plus hint dots on the current player's legal moves
- Score, turn label and the latest notice
"""

import logging
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core import SIZE, Cell
from ..core.board import column_label
from ..game import GameController
from .messages import Messages

console = Console()
logger = logging.getLogger(__name__)

_DISC_STYLE = {
    Cell.BLACK: ("●", "bold black on green"),
    Cell.WHITE: ("●", "bold white on green"),
}
_HINT = ("·", "yellow on green")
_EMPTY = (" ", "on green")


class BoardDisplay:
    """
    Renders a game to a rich console.

    Can be registered directly as a controller listener:

        display = BoardDisplay()
        game.add_listener(display.render)
    """

    def __init__(self, messages: Optional[Messages] = None, output: Optional[Console] = None):
        """
        Initialize board display.

        Args:
            messages: Text catalog (English by default)
            output: Console to print to (module console by default)
        """
        self.messages = messages or Messages()
        self.console = output if output is not None else console

    def build_table(self, game: GameController) -> Table:
        """Create the board grid for the current state."""
        playable = set(game.legal_moves)

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 1))
        table.add_column("", justify="right", style="dim")
        for col in range(SIZE):
            table.add_column(column_label(col), justify="center")

        for row in range(SIZE):
            cells = []
            for col in range(SIZE):
                value = game.board.cells[row][col]
                if value in _DISC_STYLE:
                    symbol, style = _DISC_STYLE[value]
                elif (row, col) in playable:
                    symbol, style = _HINT
                else:
                    symbol, style = _EMPTY
                cells.append(Text(symbol, style=style))
            table.add_row(str(row + 1), *cells)

        return table

    def status_lines(self, game: GameController) -> list:
        """Score, turn label and notice, in display order."""
        black, white = game.score
        lines = [
            self.messages.score_line(black, white),
            self.messages.turn_label(game.current_player, game.game_over),
        ]
        notice = self.messages.notice(game.notice, game.result)
        if notice:
            lines.append(notice)
        return lines

    def render(self, game: GameController) -> None:
        """Draw the board and status lines."""
        self.console.print()
        self.console.print(self.build_table(game))
        for line in self.status_lines(game):
            self.console.print(line, highlight=False)

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
