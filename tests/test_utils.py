"""Tests for shared utilities."""

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from worddeck.config import Config
from worddeck.utils import ClickSound, TextParser, ensure_dir, format_count, play_with_system_player, setup_logger


class TestTextParser:
    def test_collation_key(self):
        assert TextParser.collation_key("Éclair") == TextParser.collation_key("ECLAIR") == "eclair"

    def test_collation_keeps_punctuation(self):
        assert TextParser.collation_key("Don't") == "don't"

    def test_split_tokens(self):
        assert TextParser.split_tokens("  a\tb \n c ") == ["a", "b", "c"]
        assert TextParser.split_tokens("") == []

    def test_clean_for_tts(self):
        assert TextParser.clean_for_tts("<b>Hi</b> &amp;   there ") == "Hi & there"

    def test_normalize_unicode(self):
        assert TextParser.normalize_unicode("café") == "café"


class TestHelpers:
    @pytest.mark.parametrize("count,noun,expected", [
        (0, "card", "0 cards"),
        (1, "card", "1 card"),
        (1204, "card", "1,204 cards"),
        (2, "word", "2 words"),
    ])
    def test_format_count(self, count, noun, expected):
        assert format_count(count, noun) == expected

    def test_ensure_dir(self, tmp_path):
        path = ensure_dir(str(tmp_path / "a" / "b"))
        assert path.is_dir()
        assert ensure_dir(str(path)) == path


class TestLogger:
    def test_handler_attached_once(self):
        logger = setup_logger("worddeck.test_logger")
        setup_logger("worddeck.test_logger", level=logging.DEBUG)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG


class TestSystemPlayer:
    def test_launches_player(self, tmp_path):
        with patch("worddeck.utils.audio.platform.system", return_value="Linux"), \
                patch("worddeck.utils.audio.subprocess.Popen") as popen:
            assert play_with_system_player(str(tmp_path / "a.mp3"))
        assert popen.call_args[0][0][0] == "xdg-open"

    def test_missing_player(self, tmp_path):
        with patch("worddeck.utils.audio.platform.system", return_value="Linux"), \
                patch("worddeck.utils.audio.subprocess.Popen", side_effect=FileNotFoundError("xdg-open")):
            assert not play_with_system_player(str(tmp_path / "a.mp3"))


class TestClickSound:
    def test_bundled_click_exists(self):
        assert Path(Config.CLICK_SOUND).is_file()

    def test_plays_bundled_click(self):
        player = MagicMock()
        assert ClickSound(player).play()
        player.assert_called_once_with(str(Path(Config.CLICK_SOUND)))

    def test_disabled(self):
        player = MagicMock()
        assert not ClickSound(player, enabled=False).play()
        player.assert_not_called()

    def test_missing_file(self, tmp_path):
        player = MagicMock()
        assert not ClickSound(player, path=str(tmp_path / "none.wav")).play()
        player.assert_not_called()

    def test_failing_player(self):
        click = ClickSound(MagicMock(side_effect=OSError("no audio device")))
        assert not click.play()
