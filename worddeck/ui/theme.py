"""
Theme palettes for the browser UI.

Themes are plain values handed to the views; nothing reads a global
"current theme".
"""

from dataclasses import dataclass
from typing import Dict, List

import flet as ft


@dataclass(frozen=True)
class Theme:
    """Centralized design tokens for one colour scheme."""

    name: str
    mode: ft.ThemeMode
    bg: str
    surface: str
    card: str
    border: str
    text: str
    text_strong: str
    muted: str
    pill: str
    input_bg: str
    accent: str
    accent_soft: str
    icon: str

    # Spacing / radius
    RADIUS_MD = 12
    RADIUS_LG = 16
    RADIUS_XL = 24

    FONT_MONO = "JetBrains Mono, Consolas, Monaco, monospace"
    FONT_SANS = "Inter, Roboto, Segoe UI, sans-serif"


LIGHT = Theme(
    name="light",
    mode=ft.ThemeMode.LIGHT,
    bg="#F5F7FB",
    surface="#FFFFFF",
    card="#FFFFFF",
    border="#E2E8F0",
    text="#334155",
    text_strong="#0F172A",
    muted="#64748B",
    pill="#EEF2F7",
    input_bg="#F1F5F9",
    accent="#3B82F6",
    accent_soft="#DBEAFE",
    icon=ft.Icons.LIGHT_MODE_ROUNDED,
)

DARK = Theme(
    name="dark",
    mode=ft.ThemeMode.DARK,
    bg="#121212",
    surface="#1A1A1B",
    card="#242426",
    border="#2D2D30",
    text="#B3B3B3",
    text_strong="#FFFFFF",
    muted="#808080",
    pill="#2A2A2C",
    input_bg="#1F1F21",
    accent="#7C4DFF",
    accent_soft="#3A2C66",
    icon=ft.Icons.DARK_MODE_ROUNDED,
)

THEMES: Dict[str, Theme] = {
    LIGHT.name: LIGHT,
    DARK.name: DARK,
}

# Card highlight colours, picked by WordEntry.accent_index
ACCENT_COLORS: List[str] = [
    "#3B82F6",
    "#06B6D4",
    "#8B5CF6",
    "#F59E0B",
    "#22C55E",
]


def get_theme(name: str) -> Theme:
    """Look up a theme by name, defaulting to light."""
    return THEMES.get((name or "").lower(), LIGHT)


def toggled(theme: Theme) -> Theme:
    """The other theme."""
    return DARK if theme.name == LIGHT.name else LIGHT
