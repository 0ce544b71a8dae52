"""Color schemes: the ten color roles every window paints with."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Mapping

from termwin.core.color import Color


@dataclass(frozen=True)
class ColorScheme:
    """
    Color role assignments for a window.

    Attributes:
        background: Window background
        foreground: Plain text
        background_focused: Focusable element while focused
        foreground_focused: Focusable element while focused
        foreground_error: Status line and Text.error() messages
        background_focusable: Focusable element while not focused
        foreground_focusable: Focusable element while not focused
        background_activated: Input element while editing
        foreground_activated: Input element while editing
        foreground_chosen: Selected option of an unfocused Switch
    """
    background: Color
    foreground: Color
    background_focused: Color
    foreground_focused: Color
    foreground_error: Color
    background_focusable: Color
    foreground_focusable: Color
    background_activated: Color
    foreground_activated: Color
    foreground_chosen: Color

    @classmethod
    def roles(cls) -> tuple[str, ...]:
        """Names of all color roles, in declaration order."""
        return tuple(f.name for f in fields(cls))

    def with_overrides(self, overrides: Mapping[str, str | int | Color]) -> ColorScheme:
        """Return a copy with some roles replaced (values go through Color.parse)."""
        known = set(self.roles())
        changes: dict[str, Color] = {}
        for role, value in overrides.items():
            if role not in known:
                raise ValueError(f"Unknown color role: {role!r}")
            changes[role] = Color.parse(value)
        return replace(self, **changes)


BLACK_THEME = ColorScheme(
    background=Color.BLACK,
    foreground=Color.BRIGHT_WHITE,
    background_focused=Color.BRIGHT_WHITE,
    foreground_focused=Color.BLACK,
    foreground_error=Color.BRIGHT_RED,
    background_focusable=Color.BRIGHT_BLACK,
    foreground_focusable=Color.BRIGHT_WHITE,
    background_activated=Color.WHITE,
    foreground_activated=Color.BLACK,
    foreground_chosen=Color.BLACK,
)

WHITE_THEME = ColorScheme(
    background=Color.BRIGHT_WHITE,
    foreground=Color.BLACK,
    background_focused=Color.BLACK,
    foreground_focused=Color.BRIGHT_WHITE,
    foreground_error=Color.RED,
    background_focusable=Color.WHITE,
    foreground_focusable=Color.BLACK,
    background_activated=Color.BRIGHT_BLACK,
    foreground_activated=Color.BRIGHT_WHITE,
    foreground_chosen=Color.BRIGHT_WHITE,
)

LIGHT_BLUE_THEME = ColorScheme(
    background=Color.BRIGHT_CYAN,
    foreground=Color.BLACK,
    background_focused=Color.BLUE,
    foreground_focused=Color.BRIGHT_WHITE,
    foreground_error=Color.MAGENTA,
    background_focusable=Color.CYAN,
    foreground_focusable=Color.BLACK,
    background_activated=Color.BRIGHT_BLUE,
    foreground_activated=Color.BRIGHT_WHITE,
    foreground_chosen=Color.BRIGHT_WHITE,
)

DARK_BLUE_THEME = ColorScheme(
    background=Color.BLUE,
    foreground=Color.BRIGHT_WHITE,
    background_focused=Color.BRIGHT_CYAN,
    foreground_focused=Color.BLACK,
    foreground_error=Color.BRIGHT_RED,
    background_focusable=Color.BRIGHT_BLUE,
    foreground_focusable=Color.BRIGHT_WHITE,
    background_activated=Color.CYAN,
    foreground_activated=Color.BLACK,
    foreground_chosen=Color.BLACK,
)

GREEN_THEME = ColorScheme(
    background=Color.BLACK,
    foreground=Color.BRIGHT_GREEN,
    background_focused=Color.BRIGHT_GREEN,
    foreground_focused=Color.BRIGHT_WHITE,
    foreground_error=Color.BRIGHT_RED,
    background_focusable=Color.GREEN,
    foreground_focusable=Color.BLACK,
    background_activated=Color.BRIGHT_GREEN,
    foreground_activated=Color.BLACK,
    foreground_chosen=Color.BRIGHT_WHITE,
)

THEMES: dict[str, ColorScheme] = {
    "black": BLACK_THEME,
    "white": WHITE_THEME,
    "light_blue": LIGHT_BLUE_THEME,
    "dark_blue": DARK_BLUE_THEME,
    "green": GREEN_THEME,
}


def get_theme(name: str) -> ColorScheme:
    """Look up a built-in theme by name ('dark-blue' and 'dark_blue' both work)."""
    key = name.strip().lower().replace("-", "_")
    try:
        return THEMES[key]
    except KeyError:
        available = ", ".join(sorted(THEMES))
        raise ValueError(f"Unknown theme: {name!r} (available: {available})") from None
