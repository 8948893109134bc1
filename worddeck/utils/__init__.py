"""Utility modules."""

from .audio import ClickSound, play_with_system_player
from .helpers import ensure_dir, format_count
from .logger import setup_logger
from .parsing import TextParser

__all__ = [
    "ClickSound",
    "ensure_dir",
    "format_count",
    "play_with_system_player",
    "setup_logger",
    "TextParser",
]
