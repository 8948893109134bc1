"""UI module for the WordDeck browser."""

from .browser import BrowserView
from .flashcard import create_empty_card, create_flashcard
from .theme import DARK, LIGHT, Theme, get_theme, toggled

__all__ = [
    "BrowserView",
    "create_flashcard",
    "create_empty_card",
    "Theme",
    "LIGHT",
    "DARK",
    "get_theme",
    "toggled",
]
