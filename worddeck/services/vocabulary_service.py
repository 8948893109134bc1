"""
Vocabulary Service - the browsing session over a fixed word collection.

Separates browsing logic from the UI layer:
- (query, sort mode) are the only inputs that rebuild the sequence
- a rebuild always resets the cursor
- the cursor moves only through the navigator commands
"""

import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

from ..models import WordEntry
from .navigator import DeckNavigator, NavigatorState, command_for_key
from .ordering import SortMode, order_entries
from .phonetics import PhonemeTranscriber
from .repository import create_repository
from .search import filter_entries

logger = logging.getLogger(__name__)

# Commands that move between cards (and play the step sound)
STEP_COMMANDS = ("next", "prev", "jump_random")


class VocabularyService:
    """
    Service for searching, ordering and stepping through vocabulary.

    Usage:
        service = VocabularyService.load_from_file("vocabulary.json")
        service.set_query("learn")
        service.set_sort_mode(SortMode.RANDOMIZED)
        service.next()
        entry = service.current_entry()
    """

    def __init__(
        self,
        entries: Sequence[WordEntry],
        sort_mode: SortMode = SortMode.ALPHABETICAL,
        rng: Optional[random.Random] = None,
        transcriber: Optional[PhonemeTranscriber] = None,
    ):
        """
        Initialize the session.

        Args:
            entries: The full, read-only collection
            sort_mode: Initial ordering mode
            rng: Random source shared by shuffling and random jumps
            transcriber: Phonetic hint generator
        """
        self._entries: Tuple[WordEntry, ...] = tuple(entries)
        self._rng = rng or random.Random()
        self._transcriber = transcriber or PhonemeTranscriber()
        self._query: str = ""
        self._sort_mode: SortMode = SortMode.parse(sort_mode)
        self._navigator = DeckNavigator(rng=self._rng)
        self._change_callbacks: List[Callable[[], None]] = []
        self._step_callbacks: List[Callable[[], None]] = []
        self._rebuild()

    @classmethod
    def load_from_file(
        cls,
        path: Optional[str] = None,
        sort_mode: SortMode = SortMode.ALPHABETICAL,
        rng: Optional[random.Random] = None,
    ) -> "VocabularyService":
        """
        Factory method to create a session from a JSON or CSV file.

        Raises:
            VocabularyLoadError: If the file cannot be loaded
        """
        repository = create_repository(path)
        return cls(repository.load(), sort_mode=sort_mode, rng=rng)

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    @property
    def query(self) -> str:
        return self._query

    @property
    def sort_mode(self) -> SortMode:
        return self._sort_mode

    def set_query(self, query: str) -> None:
        """Change the search query; rebuilds the sequence and resets the cursor."""
        self._query = query or ""
        self._rebuild()

    def set_sort_mode(self, mode) -> None:
        """Change the ordering mode; rebuilds the sequence and resets the cursor."""
        self._sort_mode = SortMode.parse(mode)
        self._rebuild()

    def clear_query(self) -> None:
        self.set_query("")

    def _rebuild(self) -> None:
        filtered = filter_entries(self._entries, self._query)
        self._navigator.replace_sequence(order_entries(filtered, self._sort_mode, self._rng))
        logger.debug(
            "Rebuilt sequence: query=%r mode=%s matches=%d",
            self._query, self._sort_mode.value, self._navigator.length,
        )
        self._notify_change()

    # ------------------------------------------------------------------
    # Outputs
    # ------------------------------------------------------------------

    @property
    def entries(self) -> Tuple[WordEntry, ...]:
        """The full collection in load order."""
        return self._entries

    @property
    def sequence(self) -> Tuple[WordEntry, ...]:
        """Current filtered and ordered sequence."""
        return self._navigator.sequence

    @property
    def cursor(self) -> Optional[int]:
        return self._navigator.cursor

    @property
    def state(self) -> NavigatorState:
        return self._navigator.state

    def current_entry(self) -> Optional[WordEntry]:
        """Entry under the cursor, or None when nothing matches."""
        return self._navigator.current_entry

    def match_count(self) -> int:
        """Length of the current sequence."""
        return self._navigator.length

    def total_count(self) -> int:
        """Size of the whole collection."""
        return len(self._entries)

    def phonetic_hint(self, text: str) -> str:
        """Pronunciation hint for any word or phrase."""
        return self._transcriber.transcribe_multi_word(text)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def next(self) -> None:
        self._navigate("next")

    def prev(self) -> None:
        self._navigate("prev")

    def jump_random(self) -> None:
        self._navigate("jump_random")

    def jump_to_start(self) -> None:
        self._navigate("jump_to_start")

    def reset(self) -> None:
        self._navigate("reset")

    def handle_key(self, key: str, text_input_focused: bool = False) -> bool:
        """
        Apply a keyboard shortcut.

        Returns:
            True if the key was mapped to a navigation command
        """
        command = command_for_key(key, text_input_focused)
        if command is None:
            return False
        self._navigate(command)
        return True

    def _navigate(self, command: str) -> None:
        if command in STEP_COMMANDS and self._navigator.length:
            self._notify_step()
        self._navigator.apply(command)
        self._notify_change()

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def on_change(self, callback: Callable[[], None]) -> None:
        """
        Register a callback for state changes.

        Args:
            callback: Function to call after every query, mode or cursor change
        """
        self._change_callbacks.append(callback)

    def _notify_change(self) -> None:
        """Notify all registered callbacks of a state change."""
        for callback in self._change_callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Change callback failed")

    def on_step(self, callback: Callable[[], None]) -> None:
        """
        Register a callback for card steps.

        Called before next, prev and jump_random move the cursor, and
        only when there is at least one card. Failures are logged.
        """
        self._step_callbacks.append(callback)

    def _notify_step(self) -> None:
        for callback in self._step_callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Step callback failed")
