"""Core data structures: colors, themes and the off-screen grid."""

from termwin.core.cell import Cell
from termwin.core.canvas import Canvas
from termwin.core.color import Color
from termwin.core.theme import ColorScheme, THEMES, get_theme

__all__ = ["Cell", "Canvas", "Color", "ColorScheme", "THEMES", "get_theme"]
