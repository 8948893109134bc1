"""
Search - normalization and substring matching over word pairs.

A query matches an entry when its normalized form is contained in either
side of the pair, so users can type in either language.
"""

from typing import Iterable, Tuple

from ..models import WordEntry
from ..utils.parsing import TextParser


def normalize(text: str) -> str:
    """Canonical form used for every search comparison."""
    return TextParser.normalize_for_search(text)


def is_blank_query(needle: str) -> bool:
    """A normalized query with nothing but whitespace shows everything."""
    return not needle.strip()


def _contains(entry: WordEntry, needle: str) -> bool:
    return needle in normalize(entry.source_text) or needle in normalize(entry.target_text)


def matches(entry: WordEntry, query: str) -> bool:
    """
    Check whether an entry matches a search query.

    Args:
        entry: Word pair to test
        query: Raw user query

    Returns:
        True if the normalized query is blank, or if the normalized source
        or target text contains it (whitespace included) as a contiguous
        substring
    """
    needle = normalize(query)
    if is_blank_query(needle):
        return True
    return _contains(entry, needle)


def filter_entries(entries: Iterable[WordEntry], query: str) -> Tuple[WordEntry, ...]:
    """Keep the entries matching ``query``, preserving collection order."""
    needle = normalize(query)
    if is_blank_query(needle):
        return tuple(entries)
    return tuple(entry for entry in entries if _contains(entry, needle))
