"""WordDeck - Bilingual vocabulary browser with phonetic hints"""

__version__ = "1.0.0"
__author__ = "WordDeck Team"

from .config import Config, LANG_CONFIG, SettingsManager
from .models import WordEntry
from .services import (
    VocabularyService,
    SpeechService,
    SortMode,
    DeckNavigator,
    format_pronunciation,
)
from .fetchers import AudioFetcher

__all__ = [
    'Config',
    'LANG_CONFIG',
    'SettingsManager',
    'WordEntry',
    'VocabularyService',
    'SpeechService',
    'SortMode',
    'DeckNavigator',
    'format_pronunciation',
    'AudioFetcher',
]
