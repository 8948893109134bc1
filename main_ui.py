"""
WordDeck: Vocabulary Browser
----------------------------

A Flet interface for browsing the bilingual word deck.
"""

import sys
from pathlib import Path

# Ensure project root is on sys.path for absolute imports
_ROOT = Path(__file__).resolve().parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import flet as ft

from worddeck.config import Config, LANG_CONFIG, SettingsManager
from worddeck.fetchers import AudioFetcher
from worddeck.services import SpeechService, VocabularyService
from worddeck.ui import BrowserView, get_theme
from worddeck.utils import ensure_dir, setup_logger

logger = setup_logger()


# =============================================================================
# MAIN APPLICATION
# =============================================================================

class WordDeckApp:
    """Main application controller."""

    def __init__(self, page: ft.Page) -> None:
        """
        Initialize the application.

        Args:
            page: Flet page instance
        """
        self.page = page
        self.settings = SettingsManager()
        self.theme = get_theme(self.settings.get("THEME", Config.DEFAULT_THEME))
        self._setup_page()
        self._init_services()
        self._build_ui()

    def _setup_page(self) -> None:
        """Configure page settings and theme."""
        self.page.title = f"WordDeck - {Config.SOURCE_LABEL} / {Config.TARGET_LABEL}"
        self.page.theme_mode = self.theme.mode
        self.page.bgcolor = self.theme.bg
        self.page.theme = ft.Theme(
            color_scheme_seed=self.theme.accent,
            font_family="Inter, Roboto, Segoe UI, sans-serif",
        )
        self.page.padding = 0
        self.page.spacing = 0
        self.page.window.min_width = 640
        self.page.window.min_height = 600
        self.page.window.width = 960
        self.page.window.height = 820

    def _init_services(self) -> None:
        """Load the vocabulary and wire up speech."""
        self.service = VocabularyService.load_from_file(
            self.settings.get("VOCAB_FILE"),
            sort_mode=self.settings.get("SORT_MODE", Config.DEFAULT_SORT_MODE),
        )
        logger.info("Browsing %d entries", self.service.total_count())

        voices = {
            lang["speech_tag"]: self.settings.voice_for(code)
            for code, lang in LANG_CONFIG.items()
        }
        self.speech = SpeechService(
            fetcher=AudioFetcher(voices=voices),
            media_dir=self.settings.get("MEDIA_DIR"),
            scheduler=self.page.run_task,
            enabled=bool(self.settings.get("SPEECH_ENABLED", True)),
            volume=self.settings.get("VOLUME", Config.TTS_VOLUME),
        )

    def _build_ui(self) -> None:
        """Build the main UI layout."""
        self.browser = BrowserView(
            self.page,
            self.service,
            speech=self.speech,
            theme=self.theme,
            settings=self.settings,
        )
        self.speech.player = self.browser.play_audio_file
        self.page.on_keyboard_event = self.browser.on_keyboard
        self.page.add(self.browser.container)


def main(page: ft.Page) -> None:
    """
    Main entry point for Flet application.

    Args:
        page: Flet page instance
    """
    media_dir = ensure_dir(SettingsManager().get("MEDIA_DIR", Config.MEDIA_DIR))
    # Lets the audio control load rendered files from the media directory
    page.mount_file_path = str(media_dir)

    try:
        WordDeckApp(page)
    except Exception:
        import traceback
        logger.exception("UI failed to start")
        error_text = traceback.format_exc()
        page.add(
            ft.Container(
                content=ft.Column(
                    controls=[
                        ft.Text("UI failed to start", size=20, weight=ft.FontWeight.BOLD, color=ft.Colors.RED_400),
                        ft.Text("Copy this error when reporting the problem:", size=12, color=ft.Colors.WHITE70),
                        ft.Container(
                            content=ft.Text(error_text, size=11, selectable=True, color=ft.Colors.WHITE70),
                            padding=10,
                            bgcolor=ft.Colors.with_opacity(0.08, ft.Colors.WHITE),
                            border_radius=8,
                        ),
                    ],
                    spacing=10,
                ),
                padding=20,
            )
        )
        page.update()


def run() -> None:
    """Launch the desktop app."""
    ft.run(main)


if __name__ == "__main__":
    run()
