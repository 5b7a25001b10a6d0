"""
Reversi rules implementation.

Implements standard Reversi/Othello rules on an 8x8 board:
- A move must sandwich one or more opponent discs between the placed disc
  and another disc of the mover, in at least one of the 8 directions
- Every sandwiched run is flipped to the mover's colour
- Discs are counted at the end; more discs wins

All functions are pure: boards are never mutated.
"""

from enum import Enum
from typing import List, Tuple

from .board import DIRECTIONS, Board, Cell, in_bounds, opponent


class GameResult(Enum):
    """Outcome of a finished game."""

    BLACK_WINS = "black wins"
    WHITE_WINS = "white wins"
    DRAW = "draw"


def _run_to_flip(
    board: Board, row: int, col: int, player: Cell, d_row: int, d_col: int
) -> List[Tuple[int, int]]:
    """
    Opponent discs flipped in one direction by a disc placed at (row, col).

    Collects the contiguous run of opponent discs next to (row, col); the run
    only counts if a disc of `player` closes it.
    """
    other = opponent(player)
    run = []
    r, c = row + d_row, col + d_col
    while in_bounds(r, c) and board.cells[r][c] == other:
        run.append((r, c))
        r += d_row
        c += d_col

    if run and in_bounds(r, c) and board.cells[r][c] == player:
        return run
    return []


def is_legal_move(board: Board, row: int, col: int, player: Cell) -> bool:
    """
    Check whether `player` may place a disc at (row, col).

    A move is legal if the target:
    - Lies on the board
    - Is empty
    - Sandwiches at least one opponent disc in some direction

    Args:
        board: Current board
        row: Target row (0-based)
        col: Target column (0-based)
        player: Cell.BLACK or Cell.WHITE

    Returns:
        True if the move is legal
    """
    if not in_bounds(row, col) or board.cells[row][col] != Cell.EMPTY:
        return False

    for d_row, d_col in DIRECTIONS:
        if _run_to_flip(board, row, col, player, d_row, d_col):
            return True

    return False


def list_legal_moves(board: Board, player: Cell) -> List[Tuple[int, int]]:
    """
    Generate all legal moves for `player`.

    Cells are scanned in row-major order, so the result order is stable.

    Args:
        board: Current board
        player: Player to move

    Returns:
        List of (row, col) tuples
    """
    legal_moves = []

    for row, col in board.positions():
        if is_legal_move(board, row, col, player):
            legal_moves.append((row, col))

    return legal_moves


def has_any_move(board: Board, player: Cell) -> bool:
    """Whether `player` has at least one legal move. Stops at the first one."""
    return any(is_legal_move(board, row, col, player) for row, col in board.positions())


def flips_for_move(board: Board, row: int, col: int, player: Cell) -> List[Tuple[int, int]]:
    """
    List the discs a move at (row, col) would flip.

    Args:
        board: Current board
        row: Target row
        col: Target column
        player: Player placing the disc

    Returns:
        Coordinates to flip, grouped by direction; empty for off-board or
        occupied targets and for moves that sandwich nothing
    """
    if not in_bounds(row, col) or board.cells[row][col] != Cell.EMPTY:
        return []

    flips: List[Tuple[int, int]] = []
    for d_row, d_col in DIRECTIONS:
        flips.extend(_run_to_flip(board, row, col, player, d_row, d_col))
    return flips


def apply_move(board: Board, row: int, col: int, player: Cell) -> Board:
    """
    Apply a move and return the resulting board.

    Places `player` at (row, col) and flips every opponent run that ends in
    one of `player`'s discs. Legality is NOT checked: call is_legal_move
    first. Off-board coordinates raise ValueError.

    Args:
        board: Current board
        row: Target row
        col: Target column
        player: Player making the move

    Returns:
        New Board after the move
    """
    if not in_bounds(row, col):
        raise ValueError(f"({row}, {col}) is off the board")

    updates = {(row, col): player}
    for d_row, d_col in DIRECTIONS:
        for position in _run_to_flip(board, row, col, player, d_row, d_col):
            updates[position] = player

    return board.with_cells(updates)


def count_discs(board: Board) -> Tuple[int, int]:
    """
    Count discs on the board.

    Returns:
        (black_count, white_count)
    """
    return board.count(Cell.BLACK), board.count(Cell.WHITE)


def game_result(board: Board) -> GameResult:
    """
    Score a board by disc count.

    Args:
        board: Final board

    Returns:
        GameResult for whoever holds more discs, or DRAW
    """
    black, white = count_discs(board)

    if black > white:
        return GameResult.BLACK_WINS
    elif white > black:
        return GameResult.WHITE_WINS
    else:
        return GameResult.DRAW
