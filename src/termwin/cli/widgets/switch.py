"""Horizontal multiple-choice selector."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from termwin.cli.core.input import Key, KeyEvent
from termwin.cli.widgets.base import Focusable
from termwin.errors import InvalidChoices

if TYPE_CHECKING:
    from termwin.cli.core.terminal import Surface
    from termwin.core.theme import ColorScheme


class Switch(Focusable):
    """
    Row of choices with one selected; Left/Right move the selection.

    Movement stops at either end (no wraparound), but the key is still
    consumed so it never falls through to the window.
    """

    def __init__(self, choices: Sequence[str], chosen_index: int = 0) -> None:
        super().__init__()
        if not choices:
            raise InvalidChoices("Switch needs at least one choice")
        if not 0 <= chosen_index < len(choices):
            raise InvalidChoices(
                f"chosen_index {chosen_index} out of range for {len(choices)} choices"
            )
        self._choices = tuple(choices)
        self._chosen_index = chosen_index

    @property
    def choices(self) -> tuple[str, ...]:
        return self._choices

    @property
    def chosen_index(self) -> int:
        return self._chosen_index

    @property
    def chosen(self) -> str:
        return self._choices[self._chosen_index]

    @property
    def width(self) -> int:
        return len(" ".join(self._choices))

    @property
    def height(self) -> int:
        return 1

    def select(self, index: int) -> None:
        """Select a choice by index, clamped to the valid range."""
        index = max(0, min(index, len(self._choices) - 1))
        if index != self._chosen_index:
            self._chosen_index = index
            self._refresh()

    def reset(self) -> None:
        self._chosen_index = 0
        self._refresh()

    def handle_key(self, event: KeyEvent) -> bool:
        if event.key == Key.LEFT:
            self.select(self._chosen_index - 1)
            return True
        if event.key == Key.RIGHT:
            self.select(self._chosen_index + 1)
            return True
        return self._navigate(event)

    def _draw(self, surface: Surface, theme: ColorScheme) -> None:
        if self._focused:
            chosen_fg, chosen_bg = theme.foreground_focused, theme.background_focused
        else:
            chosen_fg, chosen_bg = theme.foreground_chosen, theme.background_focusable

        surface.set_cursor_visible(False)
        surface.move(self.left, self.top)
        for i, choice in enumerate(self._choices):
            if i == self._chosen_index:
                surface.set_colors(chosen_fg, chosen_bg)
            else:
                surface.set_colors(theme.foreground_focusable, theme.background_focusable)
            surface.write(choice)
            surface.write(" ")
