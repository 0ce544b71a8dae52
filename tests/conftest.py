"""Shared fixtures: off-screen canvases, themes and scripted key sources."""

from typing import Callable, Iterable, Optional

import pytest

from termwin.cli.core.input import Key, KeyEvent
from termwin.cli.core.window import Window, WindowProps
from termwin.cli.widgets import Button, Element
from termwin.core.canvas import Canvas
from termwin.core.theme import GREEN_THEME, ColorScheme


class ScriptedKeys:
    """
    Key source replaying a fixed list of events.

    Raises EOFError once the script runs out, so a serve() loop that
    never stops fails the test instead of spinning forever.
    """

    def __init__(self, events: Iterable[KeyEvent]) -> None:
        self._events = list(events)

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        if not self._events:
            raise EOFError("Key script exhausted")
        return self._events.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._events)


class CountingButton(Button):
    """Button that counts how often it is drawn."""

    def __init__(self, label: str, action: Optional[Callable[[Button], None]] = None) -> None:
        super().__init__(label, action or (lambda button: None))
        self.draws = 0

    def _draw(self, surface, theme) -> None:
        self.draws += 1
        super()._draw(surface, theme)


def keys(*items: "Key | str") -> list[KeyEvent]:
    """Build events: Key members become named keys, strings become typed characters."""
    events: list[KeyEvent] = []
    for item in items:
        if isinstance(item, Key):
            events.append(KeyEvent.of(item))
        else:
            events.extend(KeyEvent.of_char(char) for char in item)
    return events


@pytest.fixture
def theme() -> ColorScheme:
    return GREEN_THEME


@pytest.fixture
def props() -> WindowProps:
    return WindowProps(20, 10)


@pytest.fixture
def canvas() -> Canvas:
    return Canvas(20, 10)


@pytest.fixture
def make_window(theme: ColorScheme, props: WindowProps, canvas: Canvas) -> Callable[..., Window]:
    """Factory for windows drawn on the shared canvas."""

    def make(elements: Iterable[Element] = (), **kwargs) -> Window:
        kwargs.setdefault("surface", canvas)
        return Window(kwargs.pop("theme", theme), kwargs.pop("props", props), elements, **kwargs)

    return make
