"""Text parsing utilities for consistent text processing across the application."""

import html
import re
import unicodedata
from typing import List


class TextParser:
    """
    Centralized text parsing utilities.

    Single source of truth for search normalization, sort keys,
    tokenization and speech cleanup.
    """

    # HTML tag removal pattern
    HTML_TAG_PATTERN = re.compile(r'<[^>]+>')

    # Whitespace normalization pattern
    WHITESPACE_PATTERN = re.compile(r'\s+')

    @classmethod
    def normalize_unicode(cls, text: str) -> str:
        """
        Normalize text to NFC form for consistent Unicode handling.

        Prevents issues with characters like é being represented as
        either a single codepoint (NFC) or base + combining accent (NFD).
        """
        if not text:
            return ""
        return unicodedata.normalize('NFC', str(text))

    @staticmethod
    def _is_search_char(char: str) -> bool:
        category = unicodedata.category(char)
        return (
            category.startswith("L")
            or category.startswith("N")
            or char.isspace()
            or char == "-"
        )

    @classmethod
    def normalize_for_search(cls, text: str) -> str:
        """
        Canonicalize text for case- and accent-insensitive comparison.

        Decomposes characters (NFKD), lowercases, then keeps only
        letters, digits, whitespace and hyphens. Combining marks are not
        letters, so "Café" and "cafe" both become "cafe".

        Args:
            text: Any string, including empty

        Returns:
            Normalized text (never raises)
        """
        if not text:
            return ""
        decomposed = unicodedata.normalize("NFKD", str(text)).lower()
        return "".join(c for c in decomposed if cls._is_search_char(c))

    @classmethod
    def collation_key(cls, text: str) -> str:
        """
        Base-level sort key: ignores case and accents, keeps punctuation.

        "Éclair", "eclair" and "ECLAIR" produce the same key.
        """
        if not text:
            return ""
        decomposed = unicodedata.normalize("NFKD", str(text))
        stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
        return stripped.casefold()

    @classmethod
    def split_tokens(cls, text: str) -> List[str]:
        """Split text on runs of whitespace, dropping empty pieces."""
        if not text:
            return []
        return [piece for piece in cls.WHITESPACE_PATTERN.split(str(text)) if piece]

    @classmethod
    def clean_for_tts(cls, text: str) -> str:
        """
        Clean text for TTS processing.

        Removes HTML, normalizes whitespace and Unicode form.
        """
        if not text:
            return ""

        # Unescape HTML entities
        text = html.unescape(str(text))

        # Remove HTML tags
        text = cls.HTML_TAG_PATTERN.sub('', text)

        # Normalize whitespace
        text = cls.WHITESPACE_PATTERN.sub(' ', text).strip()

        return cls.normalize_unicode(text)
