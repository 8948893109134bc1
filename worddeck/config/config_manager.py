"""
User preferences for the browser.

Layering, lowest to highest priority:
    DEFAULTS < settings.json < WORDDECK_<KEY> environment variables
"""

import copy
import json
import logging
import os
from pathlib import Path
from threading import Lock
from typing import Any, Callable, Dict, Optional

from .languages import LANG_CONFIG
from .settings import Config

logger = logging.getLogger(__name__)

ENV_PREFIX = "WORDDECK_"

_TRUTHY = {"1", "true", "yes", "on"}


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


class SettingsManager:
    """
    Process-wide preference store backed by a JSON file.

    Every ``set`` writes the whole file back (atomically) unless
    ``persist=False``.

    Usage:
        prefs = SettingsManager()
        prefs.get("THEME")               # "light"
        prefs.set("SORT_MODE", "shuffle")
    """

    _instance: Optional["SettingsManager"] = None
    _instance_lock = Lock()

    DEFAULTS: Dict[str, Any] = {
        "THEME": Config.DEFAULT_THEME,
        "SORT_MODE": Config.DEFAULT_SORT_MODE,
        "SPEECH_ENABLED": True,
        "CLICK_ENABLED": True,
        "VOICE_EN": LANG_CONFIG["EN"]["voice"],
        "VOICE_ID": LANG_CONFIG["ID"]["voice"],
        "VOLUME": Config.TTS_VOLUME,
        "VOCAB_FILE": Config.VOCAB_FILE,
        "MEDIA_DIR": Config.MEDIA_DIR,
    }

    # Environment strings are converted by the type of the default value
    _COERCERS: Dict[type, Callable[[str], Any]] = {
        bool: _to_bool,
        int: int,
        float: float,
    }

    def __new__(cls, settings_file: Optional[str] = None) -> "SettingsManager":
        with cls._instance_lock:
            if cls._instance is None:
                obj = super().__new__(cls)
                obj._ready = False
                cls._instance = obj
        return cls._instance

    def __init__(self, settings_file: Optional[str] = None) -> None:
        """
        Args:
            settings_file: JSON file to read and write. Only honoured on
                first construction; defaults to Config.SETTINGS_FILE.
        """
        if self._ready:
            return
        self._path = Path(settings_file or Config.SETTINGS_FILE)
        self._write_lock = Lock()
        self._values: Dict[str, Any] = {}
        self.reload()
        self._ready = True

    @property
    def settings_file(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Loading / saving
    # ------------------------------------------------------------------

    def reload(self) -> None:
        """Rebuild the layered values from defaults, file and environment."""
        values = copy.deepcopy(self.DEFAULTS)
        values.update(self._read_file())
        values.update(self._read_environment())
        self._values = values
        self._write()

    def _read_file(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self._path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: expected a JSON object", self._path)
            return {}
        return data

    def _read_environment(self) -> Dict[str, Any]:
        overrides = {}
        for key, default in self.DEFAULTS.items():
            raw = os.environ.get(f"{ENV_PREFIX}{key}")
            if raw is None:
                continue
            overrides[key] = self._coerce(raw, default)
        return overrides

    def _coerce(self, raw: str, default: Any) -> Any:
        """Convert an environment string to the type of ``default``."""
        convert = self._COERCERS.get(type(default))
        if convert is None:
            return raw
        try:
            return convert(raw)
        except ValueError:
            logger.warning("Cannot parse %r as %s, keeping %r", raw, type(default).__name__, default)
            return default

    def _write(self) -> None:
        payload = json.dumps(self._values, indent=2, ensure_ascii=False)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        with self._write_lock:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                tmp_path.write_text(payload, encoding="utf-8")
                os.replace(tmp_path, self._path)
            except OSError as e:
                logger.warning("Could not write settings to %s: %s", self._path, e)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """Value for ``key``; containers are returned as copies."""
        value = self._values.get(key, default)
        return copy.deepcopy(value) if isinstance(value, (dict, list)) else value

    def set(self, key: str, value: Any, persist: bool = True) -> None:
        self._values[key] = value
        if persist:
            self._write()

    def get_all(self) -> Dict[str, Any]:
        return copy.deepcopy(self._values)

    def voice_for(self, language_code: str) -> Optional[str]:
        """
        Edge TTS voice for a language code such as "EN" or "ID".

        A configured voice that the language does not offer is ignored
        in favour of the language's default voice.
        """
        code = language_code.upper()
        language = LANG_CONFIG.get(code)
        configured = self._values.get(f"VOICE_{code}")
        if language is None:
            return configured or None
        if configured and configured not in language["available_voices"]:
            logger.warning("Unknown %s voice %r, using %s", code, configured, language["voice"])
            return language["voice"]
        return configured or language["voice"]

    def reset(self, key: Optional[str] = None) -> None:
        """Restore one key (or everything, when ``key`` is None) to its default."""
        if key is None:
            self._values = copy.deepcopy(self.DEFAULTS)
        elif key in self.DEFAULTS:
            self._values[key] = copy.deepcopy(self.DEFAULTS[key])
        self._write()

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared instance so the next call builds a fresh one (tests)."""
        with cls._instance_lock:
            cls._instance = None
