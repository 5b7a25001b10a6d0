"""
Board representation for Reversi / Othello.

A board is an immutable 8x8 grid of cells stored row-major as nested tuples:

       a b c d e f g h
    1  . . . . . . . .
    2  . . . . . . . .
    3  . . . . . . . .
    4  . . . O X . . .
    5  . . . X O . . .
    6  . . . . . . . .
    7  . . . . . . . .
    8  . . . . . . . .

Every move produces a new Board value, so earlier boards can be kept and
compared without aliasing problems.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

SIZE = 8

# N, NE, E, SE, S, SW, W, NW
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
)


class Cell(IntEnum):
    """Occupant of a single square. The opponent of a colour is its negation."""

    EMPTY = 0
    BLACK = 1
    WHITE = -1

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


# A player is a Cell restricted to BLACK or WHITE
Player = Cell

_SYMBOLS = {Cell.EMPTY: ".", Cell.BLACK: "X", Cell.WHITE: "O"}
_PARSE = {
    ".": Cell.EMPTY,
    "-": Cell.EMPTY,
    "X": Cell.BLACK,
    "B": Cell.BLACK,
    "O": Cell.WHITE,
    "W": Cell.WHITE,
}


def opponent(player: Cell) -> Cell:
    """Return the other colour."""
    if player == Cell.EMPTY:
        raise ValueError("EMPTY is not a player")
    return Cell(-player)


def in_bounds(row: int, col: int) -> bool:
    """Whether (row, col) lies on the 8x8 grid."""
    return 0 <= row < SIZE and 0 <= col < SIZE


@dataclass(frozen=True)
class Board:
    """
    Immutable board snapshot.

    cells[row][col] holds a Cell; rows and columns are 0-based with (0, 0) at
    the top-left.
    """

    cells: Tuple[Tuple[Cell, ...], ...]

    def __post_init__(self) -> None:
        """Validate board invariants."""
        if len(self.cells) != SIZE or any(len(row) != SIZE for row in self.cells):
            raise ValueError(f"Board must be {SIZE}x{SIZE}")
        for row in self.cells:
            for value in row:
                if not isinstance(value, Cell):
                    raise ValueError(f"Invalid cell value {value!r}")

    @classmethod
    def empty(cls) -> "Board":
        return cls(tuple(tuple(Cell.EMPTY for _ in range(SIZE)) for _ in range(SIZE)))

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from text rows.

        Accepts X/B for black, O/W for white and ./- for empty. Whitespace
        inside a row is ignored.

        Args:
            rows: Exactly 8 strings of 8 cells each

        Returns:
            Board with the given layout
        """
        parsed = []
        for text in rows:
            row = []
            for char in text.replace(" ", "").upper():
                if char not in _PARSE:
                    raise ValueError(f"Unknown board character {char!r}")
                row.append(_PARSE[char])
            parsed.append(tuple(row))
        return cls(tuple(parsed))

    def __getitem__(self, position: Tuple[int, int]) -> Cell:
        row, col = position
        return self.cell(row, col)

    def cell(self, row: int, col: int) -> Cell:
        """Occupant of (row, col). Off-board coordinates raise IndexError."""
        if not in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is off the board")
        return self.cells[row][col]

    def with_cells(self, updates: Dict[Tuple[int, int], Cell]) -> "Board":
        """Return a copy of this board with the given cells replaced."""
        rows: List[List[Cell]] = [list(row) for row in self.cells]
        for (row, col), value in updates.items():
            if not in_bounds(row, col):
                raise ValueError(f"({row}, {col}) is off the board")
            rows[row][col] = Cell(value)
        return Board(tuple(tuple(row) for row in rows))

    def positions(self) -> Iterator[Tuple[int, int]]:
        """All 64 coordinates in row-major order."""
        for row in range(SIZE):
            for col in range(SIZE):
                yield row, col

    def count(self, value: Cell) -> int:
        return sum(row.count(value) for row in self.cells)

    @property
    def empty_count(self) -> int:
        """Number of unoccupied cells."""
        return self.count(Cell.EMPTY)

    def to_rows(self) -> List[str]:
        return ["".join(value.symbol for value in row) for row in self.cells]

    def __str__(self) -> str:
        """Human-readable board with a-h columns and 1-8 rows."""
        header = "  " + " ".join(column_label(col) for col in range(SIZE))
        lines = [header]
        for index, row in enumerate(self.cells):
            lines.append(f"{index + 1} " + " ".join(value.symbol for value in row))
        return "\n".join(lines)


def column_label(col: int) -> str:
    """Letter used for a column in text output ('a' for column 0)."""
    return chr(ord("a") + col)


def create_starting_board() -> Board:
    """
    Create the standard starting position.

    For midpoint m = SIZE // 2, (m-1, m-1) and (m, m) hold White while
    (m-1, m) and (m, m-1) hold Black.
    """
    mid = SIZE // 2
    return Board.empty().with_cells(
        {
            (mid - 1, mid - 1): Cell.WHITE,
            (mid, mid): Cell.WHITE,
            (mid - 1, mid): Cell.BLACK,
            (mid, mid - 1): Cell.BLACK,
        }
    )


def board_from_values(values: Iterable[Iterable[int]]) -> Board:
    """Build a board from nested integers (0 empty, 1 black, -1 white)."""
    return Board(tuple(tuple(Cell(value) for value in row) for row in values))
