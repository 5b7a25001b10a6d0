"""Exceptions raised by a strict game controller."""

from typing import Optional

from .board import Cell
from .rules import GameResult


class ReversiError(Exception):
    """Base class for rule violations."""


class IllegalMoveError(ReversiError):
    """Move on an off-board or occupied cell, or one that flips nothing."""

    def __init__(self, row: int, col: int, player: Cell):
        self.row = row
        self.col = col
        self.player = player
        super().__init__(f"Illegal move for {player.name.lower()} at ({row}, {col})")


class GameAlreadyOverError(ReversiError):
    """Move submitted after the game has terminated."""

    def __init__(self, result: Optional[GameResult] = None):
        self.result = result
        message = "Game is already over"
        if result is not None:
            message += f": {result.value}"
        super().__init__(message)
