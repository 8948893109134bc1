"""
Ordering - presentation order for the filtered word set.

Alphabetical mode is a stable, case- and accent-insensitive sort on the
source text; shuffle mode is a uniform Fisher-Yates permutation.
"""

import random
from enum import Enum
from typing import Iterable, Optional, Tuple

from ..models import WordEntry
from ..utils.parsing import TextParser


class SortMode(Enum):
    """Available ordering modes."""
    ALPHABETICAL = "alpha"
    RANDOMIZED = "shuffle"

    @classmethod
    def parse(cls, value) -> "SortMode":
        """
        Resolve a mode from an enum member, its value or its name.

        Raises:
            ValueError: If the value names no mode
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for mode in cls:
            if text in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(f"Unknown sort mode: {value!r}. Available: {[m.value for m in cls]}")


def sort_alphabetical(entries: Iterable[WordEntry]) -> Tuple[WordEntry, ...]:
    """Stable sort by source text, ignoring case and accents."""
    return tuple(sorted(entries, key=lambda entry: TextParser.collation_key(entry.source_text)))


def shuffle_entries(
    entries: Iterable[WordEntry],
    rng: Optional[random.Random] = None,
) -> Tuple[WordEntry, ...]:
    """
    Uniformly random permutation of ``entries``.

    Fisher-Yates on a copy: walk i from the last index down to 1 and swap
    with j drawn uniformly from [0, i]. The input is never mutated.
    """
    rng = rng or random.Random()
    items = list(entries)
    for i in range(len(items) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        items[i], items[j] = items[j], items[i]
    return tuple(items)


def order_entries(
    entries: Iterable[WordEntry],
    mode: SortMode,
    rng: Optional[random.Random] = None,
) -> Tuple[WordEntry, ...]:
    """
    Build the presentation sequence for ``entries``.

    Args:
        entries: Filtered entries in collection order
        mode: Ordering mode (enum or its string value)
        rng: Random source, only consumed in shuffle mode

    Returns:
        New ordered tuple
    """
    mode = SortMode.parse(mode)
    if mode is SortMode.RANDOMIZED:
        return shuffle_entries(entries, rng)
    return sort_alphabetical(entries)
