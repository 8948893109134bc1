"""Global settings and configuration."""

import os
from dataclasses import dataclass
from pathlib import Path

# Load .env file if python-dotenv is available
try:
    from dotenv import load_dotenv
    # Load from project root
    _env_path = Path(__file__).parent.parent.parent / ".env"
    load_dotenv(_env_path)
except ImportError:
    pass  # python-dotenv not installed, use environment variables directly

from .languages import LANG_CONFIG

# Deck direction: the card front is SOURCE_LANG, the translation is TARGET_LANG
SOURCE_LANG = os.environ.get("WORDDECK_SOURCE_LANG", "EN")
TARGET_LANG = os.environ.get("WORDDECK_TARGET_LANG", "ID")


@dataclass
class Config:
    """Application-wide configuration."""

    source = LANG_CONFIG.get(SOURCE_LANG, LANG_CONFIG["EN"])
    target = LANG_CONFIG.get(TARGET_LANG, LANG_CONFIG["ID"])

    # Language parameters
    SOURCE_LANG: str = SOURCE_LANG
    TARGET_LANG: str = TARGET_LANG
    SOURCE_LABEL: str = source["label"]
    TARGET_LABEL: str = target["label"]
    SOURCE_SPEECH_TAG: str = source["speech_tag"]
    TARGET_SPEECH_TAG: str = target["speech_tag"]

    # Deck presentation
    DECK_TITLE: str = "GSL"
    DECK_SUBTITLE: str = "Core deck for everyday speaking, listening, and reading."
    DEFAULT_THEME: str = "light"        # Options: "light", "dark"
    DEFAULT_SORT_MODE: str = "alpha"    # Options: "alpha", "shuffle"

    # Speech
    TTS_VOLUME: str = "+0%"
    TTS_TIMEOUT: int = 30

    # Cross-platform paths using pathlib
    # BASE_DIR is the project root (parent of worddeck/)
    BASE_DIR: Path = Path(__file__).parent.parent.parent.resolve()
    PACKAGE_DIR: Path = Path(__file__).parent.parent.resolve()

    VOCAB_FILE: str = os.environ.get(
        "WORDDECK_VOCAB_FILE",
        str(PACKAGE_DIR / "data" / "vocabulary.json"),
    )
    CLICK_SOUND: str = str(PACKAGE_DIR / "data" / "click.wav")
    MEDIA_DIR: str = str(BASE_DIR / "media")
    SETTINGS_FILE: str = str(BASE_DIR / "settings.json")
