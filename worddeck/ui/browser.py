"""
Browser View - Search, reorder and step through the word deck
-------------------------------------------------------------

Search box, A → Z / Shuffle ordering, one flashcard at a time and a
bottom navigation bar. Arrow keys step through cards unless the search
box has focus.
"""

import logging
import os
from typing import Callable, List, Optional

import flet as ft

from ..config import Config, SettingsManager
from ..services import SortMode, SpeechService, VocabularyService
from ..utils import ClickSound, format_count, play_with_system_player
from .flashcard import create_empty_card, create_flashcard
from .theme import Theme, get_theme, toggled

logger = logging.getLogger(__name__)


class BrowserView:
    """
    Single-page vocabulary browser.

    All browsing state lives in the VocabularyService; this view only
    renders it and forwards user actions.
    """

    def __init__(
        self,
        page: ft.Page,
        service: VocabularyService,
        speech: Optional[SpeechService] = None,
        theme: Optional[Theme] = None,
        settings: Optional[SettingsManager] = None,
    ) -> None:
        """
        Initialize the browser view.

        Args:
            page: Flet page instance for updates
            service: Browsing session
            speech: Pronunciation collaborator (None disables the buttons' audio)
            theme: Initial colour scheme
            settings: Where theme and sort mode choices are persisted; also
                read for CLICK_ENABLED
        """
        self.page = page
        self.service = service
        self.speech = speech
        self.theme = theme or get_theme(Config.DEFAULT_THEME)
        self._settings = settings

        # UI References
        self._search_field: Optional[ft.TextField] = None
        self._reset_button: Optional[ft.TextButton] = None
        self._count_text: Optional[ft.Text] = None
        self._card_area: Optional[ft.Container] = None
        self._mode_buttons: dict = {}
        self._search_focused: bool = False

        # Flet audio controls, one per channel ("speech", "click")
        self._audio_players: dict = {}

        self._container = ft.Container(expand=True)
        self._container.content = self._build_view().content

        self.service.on_change(self._refresh)

        click_enabled = bool(settings.get("CLICK_ENABLED", True)) if settings else True
        self._click = ClickSound(self.play_click_file, enabled=click_enabled)
        self.service.on_step(self._click.play)

    @property
    def container(self) -> ft.Container:
        """Get the main container for this view."""
        return self._container

    # =========================================================================
    # LAYOUT
    # =========================================================================

    def _build_view(self) -> ft.Container:
        """Build the main browser layout."""
        theme = self.theme
        self._card_area = ft.Container(
            content=self._build_card(),
            expand=True,
            alignment=ft.Alignment(0, 0),
        )

        body = ft.Column(
            controls=[
                self._build_header(),
                self._build_search_bar(),
                self._build_stats_row(),
                self._card_area,
                self._build_bottom_bar(),
            ],
            spacing=18,
            expand=True,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        )

        return ft.Container(
            content=ft.Container(content=body, width=820, expand=True),
            bgcolor=theme.bg,
            padding=ft.Padding.symmetric(horizontal=24, vertical=20),
            alignment=ft.Alignment(0, -1),
            expand=True,
        )

    def _build_header(self) -> ft.Row:
        theme = self.theme
        badge = ft.Container(
            content=ft.Text(
                f"{Config.DECK_TITLE} • {format_count(self.service.total_count(), 'word')}",
                size=12,
                weight=ft.FontWeight.W_600,
                color=theme.text_strong,
            ),
            bgcolor=theme.pill,
            padding=ft.Padding.symmetric(horizontal=12, vertical=4),
            border_radius=20,
        )
        theme_button = ft.IconButton(
            icon=theme.icon,
            icon_color=theme.text_strong,
            tooltip="Toggle theme",
            on_click=lambda _: self.toggle_theme(),
        )
        return ft.Row(
            controls=[
                ft.Row(
                    controls=[badge, ft.Text(Config.DECK_SUBTITLE, size=13, color=theme.muted)],
                    spacing=12,
                ),
                theme_button,
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )

    def _build_search_bar(self) -> ft.Container:
        theme = self.theme
        self._search_field = ft.TextField(
            value=self.service.query,
            hint_text="E.g. learn, speak, happy...",
            expand=True,
            border_radius=Theme.RADIUS_MD,
            bgcolor=theme.input_bg,
            color=theme.text,
            border_color=ft.Colors.TRANSPARENT,
            focused_border_color=theme.accent,
            autofocus=False,
            on_change=lambda e: self.service.set_query(e.control.value),
            on_focus=lambda _: self._set_search_focus(True),
            on_blur=lambda _: self._set_search_focus(False),
        )
        self._reset_button = ft.TextButton(
            content=ft.Row(
                controls=[
                    ft.Icon(ft.Icons.CLOSE_ROUNDED, size=14, color=theme.text_strong),
                    ft.Text("Reset", size=12, color=theme.text_strong),
                ],
                spacing=4,
                tight=True,
            ),
            visible=bool(self.service.query),
            on_click=lambda _: self._on_reset_search(),
        )
        return ft.Container(
            content=ft.Row(
                controls=[
                    ft.Icon(ft.Icons.SEARCH_ROUNDED, color=theme.text_strong),
                    ft.Column(
                        controls=[
                            ft.Text("CARI KATA", size=11, weight=ft.FontWeight.W_600, color=theme.muted),
                            ft.Text(
                                f"Search {Config.SOURCE_LABEL} or {Config.TARGET_LABEL}",
                                size=13,
                                color=theme.text_strong,
                            ),
                        ],
                        spacing=2,
                    ),
                    self._search_field,
                    self._reset_button,
                ],
                spacing=14,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            ),
            bgcolor=theme.surface,
            border=ft.border.all(1, theme.border),
            border_radius=Theme.RADIUS_LG,
            padding=ft.Padding.symmetric(horizontal=18, vertical=12),
        )

    def _build_stats_row(self) -> ft.Row:
        theme = self.theme
        self._count_text = ft.Text(self._count_label(), size=13, color=theme.muted)
        self._mode_buttons = {
            SortMode.ALPHABETICAL: self._mode_button("A → Z", SortMode.ALPHABETICAL),
            SortMode.RANDOMIZED: self._mode_button("Shuffle", SortMode.RANDOMIZED),
        }
        return ft.Row(
            controls=[
                ft.Container(
                    content=ft.Row(
                        controls=[
                            ft.Container(width=8, height=8, bgcolor=theme.accent, border_radius=4),
                            self._count_text,
                        ],
                        spacing=8,
                        tight=True,
                    ),
                    bgcolor=theme.surface,
                    border_radius=20,
                    padding=ft.Padding.symmetric(horizontal=12, vertical=8),
                ),
                ft.Row(controls=list(self._mode_buttons.values()), spacing=6),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        )

    def _mode_button(self, label: str, mode: SortMode) -> ft.TextButton:
        button = ft.TextButton(
            content=ft.Text(label, size=13, weight=ft.FontWeight.W_600),
            on_click=lambda _: self.set_sort_mode(mode),
        )
        self._style_mode_button(button, mode)
        return button

    def _style_mode_button(self, button: ft.TextButton, mode: SortMode) -> None:
        theme = self.theme
        active = self.service.sort_mode is mode
        button.style = ft.ButtonStyle(
            bgcolor={ft.ControlState.DEFAULT: theme.accent_soft if active else ft.Colors.TRANSPARENT},
            color={ft.ControlState.DEFAULT: theme.text_strong if active else theme.text},
            padding=ft.Padding.symmetric(horizontal=14, vertical=8),
            shape=ft.RoundedRectangleBorder(radius=20),
        )

    def _build_card(self) -> ft.Container:
        entry = self.service.current_entry()
        if entry is None:
            return create_empty_card(self.theme)
        return create_flashcard(
            entry,
            self.theme,
            self.service.phonetic_hint(entry.source_text),
            on_speak_source=lambda text: self.pronounce(text, Config.SOURCE_SPEECH_TAG),
            on_speak_target=lambda text: self.pronounce(text, Config.TARGET_SPEECH_TAG),
        )

    def _build_bottom_bar(self) -> ft.Container:
        theme = self.theme
        items: List[tuple] = [
            ("Deck", ft.Icons.MENU_BOOK_ROUNDED, self.service.jump_to_start),
            ("Prev", ft.Icons.ARROW_BACK_ROUNDED, self.service.prev),
            ("Shuffle", ft.Icons.AUTO_AWESOME_ROUNDED, self.service.jump_random),
            ("Next", ft.Icons.ARROW_FORWARD_ROUNDED, self.service.next),
            (
                "Dark" if theme.name == "light" else "Light",
                toggled(theme).icon,
                self.toggle_theme,
            ),
        ]
        return ft.Container(
            content=ft.Row(
                controls=[self._bar_button(label, icon, action) for label, icon, action in items],
                alignment=ft.MainAxisAlignment.SPACE_AROUND,
            ),
            width=520,
            bgcolor=theme.surface,
            border=ft.border.all(1, theme.border),
            border_radius=Theme.RADIUS_LG,
            padding=ft.Padding.symmetric(horizontal=10, vertical=8),
            shadow=ft.BoxShadow(
                spread_radius=-2,
                blur_radius=24,
                color=ft.Colors.with_opacity(0.2, ft.Colors.BLACK),
                offset=ft.Offset(0, 6),
            ),
        )

    def _bar_button(self, label: str, icon: str, action: Callable[[], None]) -> ft.Container:
        theme = self.theme
        return ft.Container(
            content=ft.Column(
                controls=[
                    ft.Icon(icon, size=20, color=theme.text_strong),
                    ft.Text(label, size=11, weight=ft.FontWeight.W_600, color=theme.text_strong),
                ],
                spacing=4,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                tight=True,
            ),
            padding=ft.Padding.symmetric(horizontal=12, vertical=6),
            border_radius=Theme.RADIUS_MD,
            ink=True,
            on_click=lambda _: action(),
        )

    def _count_label(self) -> str:
        return f"{format_count(self.service.match_count())} match"

    # =========================================================================
    # STATE -> UI
    # =========================================================================

    def _refresh(self) -> None:
        """Re-render the parts that depend on browsing state."""
        if self._card_area is None:
            return
        self._card_area.content = self._build_card()
        if self._count_text:
            self._count_text.value = self._count_label()
        if self._reset_button:
            self._reset_button.visible = bool(self.service.query)
        for mode, button in self._mode_buttons.items():
            self._style_mode_button(button, mode)
        self.page.update()

    def _rebuild(self) -> None:
        """Rebuild the whole view (theme change)."""
        self._search_focused = False
        self._container.content = self._build_view().content
        self.page.bgcolor = self.theme.bg
        self.page.theme_mode = self.theme.mode
        self.page.update()

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def _set_search_focus(self, focused: bool) -> None:
        self._search_focused = focused

    def _on_reset_search(self) -> None:
        if self._search_field:
            self._search_field.value = ""
        self.service.clear_query()

    def set_sort_mode(self, mode: SortMode) -> None:
        """Switch ordering and remember the choice."""
        self.service.set_sort_mode(mode)
        if self._settings is not None:
            self._settings.set("SORT_MODE", self.service.sort_mode.value)

    def toggle_theme(self) -> None:
        """Flip between light and dark."""
        self.theme = toggled(self.theme)
        if self._settings is not None:
            self._settings.set("THEME", self.theme.name)
        self._rebuild()

    def on_keyboard(self, e: ft.KeyboardEvent) -> None:
        """Arrow keys step through cards unless the search box has focus."""
        self.service.handle_key(e.key, text_input_focused=self._search_focused)

    def pronounce(self, text: str, language: str) -> None:
        """Fire-and-forget speech request; never blocks navigation."""
        if self.speech is None:
            return
        self.speech.pronounce(text, language)

    def play_audio_file(self, file_path: str, channel: str = "speech") -> None:
        """
        Play an audio file using Flet's native Audio control.

        Each channel keeps its own control, so a click does not cut off
        a pronunciation that is still playing.
        """
        try:
            abs_path = os.path.abspath(file_path)

            # Remove this channel's previous player if any
            previous = self._audio_players.get(channel)
            if previous is not None:
                try:
                    previous.pause()
                    if previous in self.page.overlay:
                        self.page.overlay.remove(previous)
                except Exception:
                    logger.debug("Could not detach previous audio player", exc_info=True)

            player = ft.Audio(
                src=abs_path,
                autoplay=True,
                volume=1.0,
                balance=0,
            )
            self._audio_players[channel] = player
            self.page.overlay.append(player)
            self.page.update()

        except Exception:
            # Fallback to system player if ft.Audio is unavailable
            logger.debug("Flet audio unavailable, using system player", exc_info=True)
            play_with_system_player(file_path)

    def play_click_file(self, file_path: str) -> None:
        self.play_audio_file(file_path, channel="click")
