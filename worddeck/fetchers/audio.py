"""Audio fetcher - text-to-speech via Edge TTS."""

import asyncio
import logging
import os
import uuid
from typing import Dict, Optional

import edge_tts

from ..config import Config, LANG_CONFIG, get_language_by_tag
from ..utils.parsing import TextParser
from .base import BaseFetcher

logger = logging.getLogger(__name__)


class AudioFetcher(BaseFetcher):
    """Render pronunciation audio with Edge TTS."""

    name = "edge-tts"

    def __init__(
        self,
        voices: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize audio fetcher.

        Args:
            voices: Speech tag -> voice name overrides, e.g. {"en-US": "en-US-GuyNeural"}
            timeout: Seconds to wait for the TTS service
        """
        self.voices: Dict[str, str] = {
            settings["speech_tag"].lower(): settings["voice"]
            for settings in LANG_CONFIG.values()
        }
        for tag, voice in (voices or {}).items():
            if voice:
                self.voices[tag.lower()] = voice
        self.timeout = timeout or Config.TTS_TIMEOUT

    def voice_for(self, language: str) -> Optional[str]:
        """Pick the voice for a speech tag, falling back to the language's default."""
        voice = self.voices.get((language or "").lower())
        if voice:
            return voice
        settings = get_language_by_tag(language)
        if settings:
            return self.voices.get(settings["speech_tag"].lower(), settings["voice"])
        return None

    def supports(self, language: str) -> bool:
        return self.voice_for(language) is not None

    def clean_text(self, text: str) -> str:
        """Clean text for TTS processing using centralized TextParser."""
        return TextParser.clean_for_tts(text)

    async def fetch(
        self,
        source: str,
        output_path: str,
        language: str = "en-US",
        volume: str = "+0%",
    ) -> bool:
        """
        Generate speech audio for ``source``.

        Uses atomic write pattern: write to temp file, then rename.

        Args:
            source: Text to convert to speech
            output_path: Path to save MP3
            language: Speech tag such as "en-US" or "id-ID"
            volume: Volume adjustment (e.g., "+0%", "+40%")

        Returns:
            True if successful, False otherwise
        """
        if not source or not str(source).strip():
            return False

        voice = self.voice_for(language)
        if voice is None:
            logger.warning("No voice configured for language %s", language)
            return False

        temp_path = None
        try:
            clean_text = self.clean_text(source)
            if not clean_text:
                return False

            # Ensure directory exists
            os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)

            # Atomic write: save to temp file first
            temp_path = f"{output_path}.{uuid.uuid4().hex[:8]}.tmp"

            communicate = edge_tts.Communicate(clean_text, voice, volume=volume)
            await asyncio.wait_for(communicate.save(temp_path), timeout=self.timeout)

            # Verify file was created and has content
            if os.path.exists(temp_path) and os.path.getsize(temp_path) > 100:
                os.replace(temp_path, output_path)
                temp_path = None  # Mark as successfully moved
                return True

            logger.warning("Edge TTS returned no audio for %r", clean_text[:50])
            return False

        except asyncio.CancelledError:
            raise
        except Exception as e:
            error_msg = str(e)
            if "429" in error_msg or "Too Many Requests" in error_msg:
                logger.warning("Rate limit hit (429): %s", error_msg[:80])
            else:
                logger.warning("Error generating audio: %s", error_msg[:80] or type(e).__name__)
            return False

        finally:
            # Clean up temp file if it still exists (failed write)
            if temp_path and os.path.exists(temp_path):
                try:
                    os.remove(temp_path)
                except OSError:
                    pass
