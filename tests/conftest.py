"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from worddeck.config import SettingsManager
from worddeck.models import WordEntry


class FixedRandom:
    """Random source that always returns the same value in [0, 1)."""

    def __init__(self, value: float = 0.0):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path):
    """Point the settings singleton at a throwaway file."""
    SettingsManager.reset_instance()
    settings = SettingsManager(str(tmp_path / "settings.json"))
    yield settings
    SettingsManager.reset_instance()


@pytest.fixture
def sample_entries():
    """Small collection in load order (deliberately not alphabetical)."""
    return [
        WordEntry(id=3, source_text="learn", target_text="belajar"),
        WordEntry(id=1, source_text="Apple", target_text="apel"),
        WordEntry(id=7, source_text="café", target_text="kafe"),
        WordEntry(id=2, source_text="clear", target_text="jelas"),
        WordEntry(id=5, source_text="lean", target_text="bersandar"),
        WordEntry(id=4, source_text="thank you", target_text="terima kasih"),
    ]


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def vocab_json(tmp_path):
    """Write a JSON vocabulary file and return its path."""
    def _write(records, name="vocabulary.json"):
        path = tmp_path / name
        path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def sample_records():
    return [
        {"id": 1, "english": "learn", "indonesian": "belajar"},
        {"id": 2, "english": "clear", "indonesian": "jelas"},
        {"id": 3, "english": "lean", "indonesian": "bersandar"},
    ]
