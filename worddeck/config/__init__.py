"""Configuration module for WordDeck."""

from .settings import Config
from .languages import LANG_CONFIG, get_language_by_tag
from .config_manager import SettingsManager

__all__ = [
    'Config',
    'LANG_CONFIG',
    'get_language_by_tag',
    'SettingsManager',
]
