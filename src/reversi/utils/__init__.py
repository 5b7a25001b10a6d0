"""Presentation helpers for the terminal game."""

from .messages import DEFAULT_LANG, SUPPORTED_LANGS, Messages
from .rich_display import BoardDisplay, setup_rich_logging

__all__ = [
    "DEFAULT_LANG",
    "SUPPORTED_LANGS",
    "Messages",
    "BoardDisplay",
    "setup_rich_logging",
]
