"""
Phonetic hints - rule-based grapheme-to-phoneme approximation.

Not a dictionary lookup and not phonologically exact: a fixed, ordered
table of cluster substitutions followed by a per-letter fallback map.
Later rules see the output of earlier ones, so the table order matters.

Usage:
    from worddeck.services.phonetics import transcribe, format_pronunciation

    transcribe("think")                 # "θɪnk"
    format_pronunciation("thank you")   # "/θænk · iæʊ/"
"""

import re
from typing import List, Optional, Pattern, Tuple

from ..utils.parsing import TextParser

# (pattern, replacement) in application order.
# A trailing \b anchors to the end of a word; re.ASCII keeps IPA output
# symbols from counting as word characters.
PHONEME_RULES: List[Tuple[str, str]] = [
    (r"tion\b", "ʃən"),
    (r"sion\b", "ʒən"),
    (r"ough", "ʌf"),
    (r"augh", "ɔː"),
    (r"igh", "aɪ"),
    (r"ph", "f"),
    (r"ch", "tʃ"),
    (r"sh", "ʃ"),
    (r"th", "θ"),
    (r"oo", "uː"),
    (r"ee", "iː"),
    (r"ea", "iː"),
    (r"ai", "eɪ"),
    (r"ay", "eɪ"),
    (r"oa", "oʊ"),
    (r"ie", "aɪ"),
    (r"ou", "aʊ"),
    (r"ow", "oʊ"),
    (r"er\b", "ɚ"),
    (r"ar", "ɑːr"),
    (r"or", "ɔːr"),
    (r"ir", "ɜr"),
    (r"ur", "ɜr"),
    (r"al", "ɔːl"),
    (r"qu", "kw"),
]

LETTER_TO_IPA = {
    "a": "æ", "b": "b", "c": "k", "d": "d", "e": "ɛ", "f": "f", "g": "g",
    "h": "h", "i": "ɪ", "j": "ʤ", "k": "k", "l": "l", "m": "m", "n": "n",
    "o": "ɒ", "p": "p", "q": "k", "r": "ɹ", "s": "s", "t": "t", "u": "ʌ",
    "v": "v", "w": "w", "x": "ks", "y": "i", "z": "z",
}

TOKEN_SEPARATOR = " · "
DELIMITER = "/"

_LETTER_PATTERN = re.compile(r"[a-z]")


class PhonemeTranscriber:
    """
    Applies an ordered substitution table and a letter fallback map.

    The default instance uses PHONEME_RULES and LETTER_TO_IPA; custom
    tables can be supplied for other source languages.
    """

    def __init__(
        self,
        rules: Optional[List[Tuple[str, str]]] = None,
        letter_map: Optional[dict] = None,
    ):
        self._rules: List[Tuple[Pattern, str]] = [
            (re.compile(pattern, re.ASCII), replacement)
            for pattern, replacement in (rules if rules is not None else PHONEME_RULES)
        ]
        self._letter_map = dict(letter_map if letter_map is not None else LETTER_TO_IPA)

    def transcribe(self, word: str) -> str:
        """
        Convert a single word to its phonetic hint.

        Characters outside the letter map (digits, punctuation, already
        substituted symbols) pass through unchanged.
        """
        if not word:
            return ""
        value = str(word).lower()
        for pattern, replacement in self._rules:
            value = pattern.sub(replacement, value)
        return _LETTER_PATTERN.sub(
            lambda match: self._letter_map.get(match.group(0), match.group(0)),
            value,
        )

    def transcribe_multi_word(self, text: str) -> str:
        """
        Transcribe every whitespace-separated token and wrap the result.

        Returns:
            "/tok1 · tok2/" or "" when the text has no tokens
        """
        tokens = TextParser.split_tokens(text)
        if not tokens:
            return ""
        hint = TOKEN_SEPARATOR.join(self.transcribe(token) for token in tokens)
        return f"{DELIMITER}{hint}{DELIMITER}"


_DEFAULT = PhonemeTranscriber()


def transcribe(word: str) -> str:
    """Phonetic hint for one word using the default rule table."""
    return _DEFAULT.transcribe(word)


def format_pronunciation(text: str) -> str:
    """Display string for a word or phrase, e.g. "/θænk · iæʊ/"."""
    return _DEFAULT.transcribe_multi_word(text)
