"""Core board representation and rules."""

from .board import (
    DIRECTIONS,
    SIZE,
    Board,
    Cell,
    Player,
    board_from_values,
    create_starting_board,
    in_bounds,
    opponent,
)
from .errors import GameAlreadyOverError, IllegalMoveError, ReversiError
from .rules import (
    GameResult,
    apply_move,
    count_discs,
    flips_for_move,
    game_result,
    has_any_move,
    is_legal_move,
    list_legal_moves,
)

__all__ = [
    "DIRECTIONS",
    "SIZE",
    "Board",
    "Cell",
    "Player",
    "board_from_values",
    "create_starting_board",
    "in_bounds",
    "opponent",
    "GameAlreadyOverError",
    "IllegalMoveError",
    "ReversiError",
    "GameResult",
    "apply_move",
    "count_discs",
    "flips_for_move",
    "game_result",
    "has_any_move",
    "is_legal_move",
    "list_legal_moves",
]
