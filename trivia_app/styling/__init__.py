"""Styling module for TriviaQt."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
