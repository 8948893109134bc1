"""
Navigator - cyclic cursor over the ordered word sequence.

The cursor only changes through reset, next, prev, jump_random and
jump_to_start. Every transition is total: on an empty sequence they all
leave the navigator in the EMPTY state with no selection.
"""

import random
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from ..models import WordEntry


class NavigatorState(Enum):
    """Navigator states."""
    EMPTY = "empty"
    POSITIONED = "positioned"


# Keyboard shortcuts (Flet key names) -> navigator command
KEY_COMMANDS: Dict[str, str] = {
    "Arrow Left": "prev",
    "Arrow Right": "next",
}


def command_for_key(key: str, text_input_focused: bool = False) -> Optional[str]:
    """
    Map a key press to a navigation command.

    Keys are ignored while a text input has focus so that arrow keys
    keep moving the caret inside the search box.
    """
    if text_input_focused:
        return None
    return KEY_COMMANDS.get(key)


class DeckNavigator:
    """
    Cursor over an ordered, read-only sequence of entries.

    Usage:
        nav = DeckNavigator(sequence)
        nav.next()
        entry = nav.current_entry
    """

    def __init__(
        self,
        sequence: Sequence[WordEntry] = (),
        rng: Optional[random.Random] = None,
    ):
        self._rng = rng or random.Random()
        self._sequence: Tuple[WordEntry, ...] = tuple(sequence)
        self._cursor: Optional[int] = None
        self.reset()

    @property
    def sequence(self) -> Tuple[WordEntry, ...]:
        return self._sequence

    @property
    def length(self) -> int:
        return len(self._sequence)

    @property
    def cursor(self) -> Optional[int]:
        """Current index, or None when the sequence is empty."""
        return self._cursor

    @property
    def state(self) -> NavigatorState:
        if self._sequence:
            return NavigatorState.POSITIONED
        return NavigatorState.EMPTY

    @property
    def is_empty(self) -> bool:
        return not self._sequence

    @property
    def current_entry(self) -> Optional[WordEntry]:
        """Entry under the cursor, or None when empty."""
        if self._cursor is None:
            return None
        return self._sequence[self._cursor]

    def replace_sequence(self, sequence: Sequence[WordEntry]) -> None:
        """Swap in a freshly computed sequence and reset the cursor."""
        self._sequence = tuple(sequence)
        self.reset()

    def reset(self) -> None:
        """Cursor to 0, or no selection when empty."""
        self._cursor = 0 if self._sequence else None

    def jump_to_start(self) -> None:
        self.reset()

    def next(self) -> None:
        """Step forward, wrapping past the end to 0."""
        if self.is_empty:
            return
        self._cursor = (self._cursor + 1) % self.length

    def prev(self) -> None:
        """Step back, wrapping before the start to the last entry."""
        if self.is_empty:
            return
        self._cursor = (self._cursor - 1 + self.length) % self.length

    def jump_random(self) -> None:
        """Jump to a uniformly random position (may repeat the current one)."""
        if self.is_empty:
            return
        self._cursor = int(self._rng.random() * self.length)

    def apply(self, command: str) -> bool:
        """
        Run a navigation command by name.

        Returns:
            True if the command name is known
        """
        handler = {
            "next": self.next,
            "prev": self.prev,
            "jump_random": self.jump_random,
            "jump_to_start": self.jump_to_start,
            "reset": self.reset,
        }.get(command)
        if handler is None:
            return False
        handler()
        return True
