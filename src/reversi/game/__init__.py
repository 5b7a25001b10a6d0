"""Turn management for a single game session."""

from .controller import GameController, Notice, SessionState, create_initial_state

__all__ = [
    "GameController",
    "Notice",
    "SessionState",
    "create_initial_state",
]
