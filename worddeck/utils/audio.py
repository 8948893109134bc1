"""System audio playback for rendered pronunciation files."""

import logging
import os
import platform
import subprocess
from pathlib import Path
from typing import Any, Callable, Optional

from ..config import Config

logger = logging.getLogger(__name__)


def play_with_system_player(file_path: str) -> bool:
    """
    Open an audio file with the platform's default player.

    Returns:
        True if a player was launched
    """
    abs_path = os.path.abspath(file_path)
    try:
        system = platform.system()
        if system == "Windows":
            os.startfile(abs_path)
        elif system == "Darwin":
            subprocess.Popen(["afplay", abs_path])
        else:
            subprocess.Popen(["xdg-open", abs_path])
        return True
    except Exception as e:
        logger.warning("No audio player available: %s", e)
        return False


class ClickSound:
    """
    Short feedback sound for card steps.

    Playback problems (missing file, no audio device) are logged and
    ignored so they never interrupt navigation.
    """

    def __init__(self, player: Callable[[str], Any], path: Optional[str] = None, enabled: bool = True):
        """
        Args:
            player: Called with the sound file path
            path: Sound file, defaults to the bundled click
            enabled: When False, play() does nothing
        """
        self.player = player
        self.path = Path(path or Config.CLICK_SOUND)
        self.enabled = enabled

    def play(self) -> bool:
        """Play the click; True if it was handed to the player."""
        if not self.enabled:
            return False
        if not self.path.exists():
            logger.debug("Click sound missing: %s", self.path)
            return False
        try:
            self.player(str(self.path))
            return True
        except Exception as e:
            logger.debug("Click sound failed: %s", e)
            return False
