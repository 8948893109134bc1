"""
Flashcard Component - one word pair with pronunciation controls.
"""

from typing import Callable

import flet as ft

from ..config import Config
from ..models import WordEntry
from .theme import ACCENT_COLORS, Theme


def _pronounce_button(
    theme: Theme,
    tooltip: str,
    on_click: Callable[[], None],
) -> ft.TextButton:
    return ft.TextButton(
        content=ft.Row(
            controls=[
                ft.Icon(ft.Icons.VOLUME_UP_ROUNDED, size=16, color=theme.text_strong),
                ft.Text("Pronounce", size=13, weight=ft.FontWeight.W_600, color=theme.text_strong),
            ],
            spacing=6,
            tight=True,
        ),
        tooltip=tooltip,
        on_click=lambda _: on_click(),
        style=ft.ButtonStyle(
            bgcolor={ft.ControlState.DEFAULT: theme.pill},
            padding=ft.Padding.symmetric(horizontal=12, vertical=8),
            shape=ft.RoundedRectangleBorder(radius=20),
        ),
    )


def create_flashcard(
    entry: WordEntry,
    theme: Theme,
    phonetic_hint: str,
    on_speak_source: Callable[[str], None],
    on_speak_target: Callable[[str], None],
) -> ft.Container:
    """
    Build the card for a single entry.

    Args:
        entry: Word pair to show
        theme: Active colour scheme
        phonetic_hint: Pre-computed hint for the source text
        on_speak_source: Called with the source text on "Pronounce"
        on_speak_target: Called with the target text on "Pronounce"

    Returns:
        Card container
    """
    accent = ACCENT_COLORS[entry.accent_index(len(ACCENT_COLORS))]

    header = ft.Row(
        controls=[
            ft.Text(
                Config.SOURCE_LABEL.upper(),
                size=11,
                weight=ft.FontWeight.W_600,
                color=theme.muted,
            ),
            ft.Container(
                content=ft.Text(
                    entry.label,
                    size=11,
                    weight=ft.FontWeight.BOLD,
                    color=theme.text_strong,
                ),
                bgcolor=theme.pill,
                padding=ft.Padding.symmetric(horizontal=12, vertical=4),
                border_radius=20,
            ),
        ],
        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
    )

    source_row = ft.Row(
        controls=[
            ft.Text(
                entry.source_text,
                size=34,
                weight=ft.FontWeight.W_600,
                color=theme.text_strong,
                expand=True,
                selectable=True,
            ),
            _pronounce_button(
                theme,
                f"Play {Config.SOURCE_LABEL} pronunciation",
                lambda: on_speak_source(entry.source_text),
            ),
        ],
        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        vertical_alignment=ft.CrossAxisAlignment.START,
    )

    hint_row = ft.Row(
        controls=[
            ft.Text("Pronunciation", size=13, weight=ft.FontWeight.W_600, color=theme.text_strong),
            ft.Icon(ft.Icons.VOLUME_UP_ROUNDED, size=14, color=theme.text),
            ft.Text(phonetic_hint, size=13, font_family=Theme.FONT_MONO, color=theme.text, selectable=True),
        ],
        spacing=8,
        wrap=True,
    )

    target_row = ft.Row(
        controls=[
            ft.Text(
                entry.target_text,
                size=22,
                color=theme.text,
                expand=True,
                selectable=True,
            ),
            _pronounce_button(
                theme,
                f"Play {Config.TARGET_LABEL} pronunciation",
                lambda: on_speak_target(entry.target_text),
            ),
        ],
        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        vertical_alignment=ft.CrossAxisAlignment.START,
    )

    return ft.Container(
        content=ft.Column(
            controls=[
                header,
                source_row,
                hint_row,
                ft.Text(
                    Config.TARGET_LABEL.upper(),
                    size=11,
                    weight=ft.FontWeight.W_600,
                    color=theme.muted,
                ),
                target_row,
            ],
            spacing=14,
        ),
        width=560,
        padding=32,
        bgcolor=theme.card,
        border=ft.border.all(1, theme.border),
        border_radius=Theme.RADIUS_XL,
        shadow=ft.BoxShadow(
            spread_radius=-2,
            blur_radius=24,
            color=ft.Colors.with_opacity(0.25, accent),
            offset=ft.Offset(0, 6),
        ),
    )


def create_empty_card(theme: Theme) -> ft.Container:
    """Placeholder shown when nothing matches the search."""
    return ft.Container(
        content=ft.Column(
            controls=[
                ft.Icon(ft.Icons.SEARCH_OFF_ROUNDED, size=48, color=theme.muted),
                ft.Text("No matches found", size=18, weight=ft.FontWeight.BOLD, color=theme.text_strong),
                ft.Text("Try another keyword or reset the search.", size=13, color=theme.muted),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            spacing=8,
        ),
        width=560,
        padding=32,
        bgcolor=theme.card,
        border=ft.border.all(1, theme.border),
        border_radius=Theme.RADIUS_XL,
        alignment=ft.Alignment(0, 0),
    )
