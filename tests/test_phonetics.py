"""Tests for the phonetic hint transcriber."""

import pytest

from worddeck.services.phonetics import (
    PHONEME_RULES,
    PhonemeTranscriber,
    format_pronunciation,
    transcribe,
)


class TestTranscribe:
    """Tests for single-word transcription."""

    @pytest.mark.parametrize("word,expected", [
        ("think", "θɪnk"),
        ("nation", "næʃən"),
        ("decision", "dɛkɪʒən"),
        ("phone", "fɒnɛ"),
        ("water", "wætɚ"),
        ("quick", "kwɪkk"),
        ("very", "vɛɹi"),
    ])
    def test_known_words(self, word, expected):
        """Test rule table plus letter fallback on common words."""
        assert transcribe(word) == expected

    def test_case_insensitive(self):
        """Test input is lowercased first."""
        assert transcribe("THINK") == transcribe("think")

    def test_empty(self):
        """Test empty input gives empty output."""
        assert transcribe("") == ""

    def test_word_final_anchor(self):
        """Test -tion only rewrites at the end of a word."""
        assert "ʃən" not in transcribe("nationality")
        assert transcribe("nation.") == "næʃən."

    def test_er_not_word_final(self):
        """Test 'er' inside a word is left to the letter map."""
        assert "ɚ" not in transcribe("very")

    def test_later_rules_see_earlier_output(self):
        """Test letters produced by a cluster rule still go through the letter map."""
        # "ee" -> "iː", then the "i" is mapped like any other letter
        assert transcribe("see") == "sɪː"

    def test_unmapped_characters_pass_through(self):
        """Test digits and punctuation are kept."""
        assert transcribe("b2b") == "b2b"
        assert transcribe("don't") == "dɒn't"

    def test_deterministic(self):
        """Test repeated calls agree."""
        assert transcribe("information") == transcribe("information")


class TestFormatPronunciation:
    """Tests for multi-word formatting."""

    def test_multi_word(self):
        """Test tokens are joined and wrapped in slashes."""
        assert format_pronunciation("thank you") == "/θænk · iæʊ/"

    def test_single_letters(self):
        """Test separator count matches token count."""
        assert format_pronunciation("a b c") == "/æ · b · k/"

    def test_extra_whitespace_ignored(self):
        """Test runs of whitespace produce no empty tokens."""
        assert format_pronunciation("  thank \t  you ") == "/θænk · iæʊ/"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_no_tokens(self, text):
        """Test blank input gives an empty string."""
        assert format_pronunciation(text) == ""


class TestPhonemeTranscriber:
    """Tests for custom rule tables."""

    def test_rule_order(self):
        """Test the default table starts with the word-final rules."""
        assert PHONEME_RULES[0] == (r"tion\b", "ʃən")
        assert PHONEME_RULES[-1] == ("qu", "kw")
        assert len(PHONEME_RULES) == 25

    def test_custom_tables(self):
        """Test a transcriber with its own rules and letter map."""
        transcriber = PhonemeTranscriber(rules=[("ng", "ŋ")], letter_map={"a": "a"})
        assert transcriber.transcribe("bang") == "baŋ"
        assert transcriber.transcribe_multi_word("bang bang") == "/baŋ · baŋ/"
