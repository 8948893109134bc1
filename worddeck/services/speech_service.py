"""
Speech Service - fire-and-forget pronunciation requests.

Each request supersedes the previous pending one; nothing is queued.
Failures (no network, no voice, no audio player) are logged and
swallowed so they never disturb browsing state.
"""

import asyncio
import hashlib
import logging
from pathlib import Path
from typing import Any, Callable, Optional

from ..config import Config
from ..fetchers import AudioFetcher
from ..fetchers.base import BaseFetcher

logger = logging.getLogger(__name__)

# Schedules ``coro_fn(*args)`` and returns a handle with cancel()/done(),
# e.g. Flet's page.run_task or the default asyncio scheduler below.
Scheduler = Callable[..., Any]


def _schedule_on_running_loop(coro_fn, *args) -> asyncio.Task:
    return asyncio.get_running_loop().create_task(coro_fn(*args))


class SpeechService:
    """
    Turns "pronounce this" actions into cached TTS audio and playback.

    Usage:
        speech = SpeechService(player=play_file, scheduler=page.run_task)
        speech.pronounce("learn", "en-US")
    """

    def __init__(
        self,
        fetcher: Optional[BaseFetcher] = None,
        media_dir: Optional[str] = None,
        player: Optional[Callable[[str], None]] = None,
        scheduler: Optional[Scheduler] = None,
        enabled: bool = True,
        volume: str = Config.TTS_VOLUME,
    ):
        """
        Initialize speech service.

        Args:
            fetcher: TTS backend (defaults to AudioFetcher)
            media_dir: Directory for rendered audio (defaults to Config.MEDIA_DIR)
            player: Called with the audio file path once it is ready
            scheduler: Runs the async request (defaults to the running asyncio loop)
            enabled: When False, pronounce() does nothing
            volume: Edge TTS volume adjustment
        """
        self.media_dir = Path(media_dir or Config.MEDIA_DIR)
        self.player = player
        self.enabled = enabled
        self.volume = volume
        self._fetcher = fetcher
        self._schedule = scheduler or _schedule_on_running_loop
        self._pending: Optional[Any] = None

    @property
    def fetcher(self) -> BaseFetcher:
        """Lazy-load the TTS fetcher."""
        if self._fetcher is None:
            self._fetcher = AudioFetcher()
        return self._fetcher

    @property
    def has_pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def audio_path(self, text: str, language: str) -> Path:
        """Cache location for a (text, language) pair."""
        digest = hashlib.sha256(f"{language}|{text}".encode("utf-8")).hexdigest()[:16]
        tag = (language or "xx").replace("-", "_").lower()
        return self.media_dir / f"_say_{digest}_{tag}.mp3"

    def file_exists(self, path: Path) -> bool:
        """Check if a media file exists and has content."""
        return path.exists() and path.stat().st_size > 100

    def cancel_pending(self) -> None:
        """Cancel the in-flight request, if any."""
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    def pronounce(self, text: str, language: str) -> Optional[Any]:
        """
        Request speech for ``text`` in ``language`` without waiting for it.

        Returns:
            The scheduled handle, or None if nothing was scheduled
        """
        if not self.enabled or not text or not str(text).strip():
            return None

        self.cancel_pending()
        try:
            self._pending = self._schedule(self._speak, str(text).strip(), language)
        except Exception as e:
            logger.warning("Could not schedule speech: %s", e)
            self._pending = None
        return self._pending

    async def _speak(self, text: str, language: str) -> bool:
        """Render (or reuse) audio for the text and hand it to the player."""
        try:
            if not self.fetcher.supports(language):
                logger.warning("No %s voice for %s", self.fetcher.name, language)
                return False

            path = self.audio_path(text, language)
            if not self.file_exists(path):
                success = await self.fetcher.fetch(
                    text, str(path), language=language, volume=self.volume
                )
                if not success:
                    logger.warning("Speech unavailable for %r (%s)", text[:40], language)
                    return False

            if self.player is not None:
                self.player(str(path))
            return True

        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning("Speech failed for %r: %s", text[:40], e)
            return False

    async def close(self) -> None:
        """Cancel pending work and release the fetcher."""
        self.cancel_pending()
        if self._fetcher is not None:
            await self._fetcher.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
