"""Services layer for business logic separation."""

from .search import normalize, matches, filter_entries
from .phonetics import PhonemeTranscriber, transcribe, format_pronunciation
from .ordering import SortMode, order_entries
from .navigator import DeckNavigator, NavigatorState, command_for_key
from .repository import (
    BaseRepository,
    JSONRepository,
    CSVRepository,
    VocabularyLoadError,
    create_repository,
)
from .vocabulary_service import VocabularyService
from .speech_service import SpeechService

__all__ = [
    "normalize",
    "matches",
    "filter_entries",
    "PhonemeTranscriber",
    "transcribe",
    "format_pronunciation",
    "SortMode",
    "order_entries",
    "DeckNavigator",
    "NavigatorState",
    "command_for_key",
    "BaseRepository",
    "JSONRepository",
    "CSVRepository",
    "VocabularyLoadError",
    "create_repository",
    "VocabularyService",
    "SpeechService",
]
