"""Color palette for TriviaQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Theme(Enum):
    """Application theme options, stored by value."""
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#111827",      # Gray 900
        dark="#F3F4F6"        # Gray 100
    )

    TEXT_SECONDARY = ThemeColors(
        light="#6B7280",      # Gray 500
        dark="#9CA3AF"        # Gray 400
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1F2937"        # Gray 800
    )

    BACKGROUND_SECONDARY = ThemeColors(
        light="#F3F4F6",      # Gray 100
        dark="#111827"        # Gray 900
    )

    BACKGROUND_TERTIARY = ThemeColors(
        light="#E5E7EB",      # Gray 200
        dark="#374151"        # Gray 700
    )

    # Border colors
    BORDER_PRIMARY = ThemeColors(
        light="#D1D5DB",      # Gray 300
        dark="#4B5563"        # Gray 600
    )

    # Button colors
    BUTTON_PRIMARY_BG = ThemeColors(
        light="#2563EB",      # Blue 600
        dark="#3B82F6"        # Blue 500
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#FFFFFF"
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#D1D5DB",      # Gray 300
        dark="#4B5563"        # Gray 600
    )

    # Answer feedback
    ANSWER_CORRECT = ThemeColors(
        light="#22C55E",      # Green 500
        dark="#16A34A"        # Green 600
    )

    ANSWER_INCORRECT = ThemeColors(
        light="#EF4444",      # Red 500
        dark="#DC2626"        # Red 600
    )

    # Difficulty accents
    DIFFICULTY_EASY = ThemeColors(
        light="#22C55E",
        dark="#22C55E"
    )

    DIFFICULTY_MEDIUM = ThemeColors(
        light="#EAB308",      # Yellow 500
        dark="#EAB308"
    )

    DIFFICULTY_HARD = ThemeColors(
        light="#EF4444",
        dark="#EF4444"
    )

    LOGOUT_BG = ThemeColors(
        light="#DC2626",
        dark="#DC2626"
    )

    # Question view
    PREVIEW_BG = ThemeColors(
        light="#FFFFFF",
        dark="#1F2937"
    )
