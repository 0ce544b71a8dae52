"""Single-line text input with an explicit edit mode."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from termwin.cli.core.input import Key, KeyEvent
from termwin.cli.widgets.base import Focusable
from termwin.errors import InputOverflow
from termwin.logging import get_logger

if TYPE_CHECKING:
    from termwin.cli.core.terminal import Surface
    from termwin.core.theme import ColorScheme

logger = get_logger(__name__)

PROMPT = ">: "
OVERFLOW_MESSAGE = "Input is too long!"


class InputState(Enum):
    """Interaction state of an Input."""
    UNFOCUSED = "unfocused"
    FOCUSED = "focused"
    ACTIVATED = "activated"


class Input(Focusable):
    """
    Text input line.

    States:
        UNFOCUSED <-> FOCUSED   driven by the window's focus pointer
        FOCUSED   -> ACTIVATED  Enter
        ACTIVATED -> FOCUSED    Enter

    Only while ACTIVATED do printable keys and Backspace edit the text.
    Up/Down navigate in either focused state.
    """

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self._text = text
        self._state = InputState.UNFOCUSED
        self._painted_width = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def state(self) -> InputState:
        return self._state

    @property
    def focused(self) -> bool:
        return self._state != InputState.UNFOCUSED

    @property
    def activated(self) -> bool:
        return self._state == InputState.ACTIVATED

    @property
    def width(self) -> int:
        return len(PROMPT) + len(self._text)

    @property
    def height(self) -> int:
        return 1

    # -------------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------------

    def _enter(self, state: InputState) -> None:
        if self._state == state:
            return
        self._state = state
        self._refresh()

    def focus(self) -> None:
        if self._state == InputState.UNFOCUSED:
            self._enter(InputState.FOCUSED)

    def unfocus(self) -> None:
        self._enter(InputState.UNFOCUSED)

    def activate(self) -> None:
        """Enter edit mode (only meaningful while focused)."""
        if self._state == InputState.FOCUSED:
            self._enter(InputState.ACTIVATED)

    def deactivate(self) -> None:
        """Leave edit mode, keeping focus."""
        if self._state == InputState.ACTIVATED:
            self._enter(InputState.FOCUSED)

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def append(self, text: str) -> None:
        """
        Append characters.

        Raises InputOverflow, leaving the content unchanged, if the
        prompt, the result and the cursor cell would not fit between
        the element's left edge and the surface's right edge.
        """
        new_text = self._text + text
        if self.attached:
            limit = self.window.surface.width
            if self.left + len(PROMPT) + len(new_text) + 1 > limit:
                raise InputOverflow(len(new_text), limit)
        self._text = new_text
        self._refresh()

    def backspace(self) -> None:
        """Remove the last character, if any."""
        if self._text:
            self._text = self._text[:-1]
            self._refresh()

    def clear(self) -> None:
        """Remove all content."""
        self._text = ""
        self._refresh()

    def reset(self) -> None:
        self.clear()

    # -------------------------------------------------------------------------
    # Keys
    # -------------------------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> bool:
        if self._state == InputState.ACTIVATED:
            return self._handle_key_activated(event)
        if event.key == Key.ENTER:
            self.activate()
            return True
        return self._navigate(event)

    def _handle_key_activated(self, event: KeyEvent) -> bool:
        if event.key == Key.ENTER:
            self.deactivate()
            return True
        if event.key == Key.BACKSPACE:
            self.backspace()
            return True
        if event.is_char:
            assert event.char is not None
            try:
                self.append(event.char)
            except InputOverflow as e:
                logger.info("Rejected input: %s", e)
                self.window.report_error(OVERFLOW_MESSAGE)
                self._refresh()
            return True
        return self._navigate(event)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _draw(self, surface: Surface, theme: ColorScheme) -> None:
        if self._state == InputState.ACTIVATED:
            fg, bg = theme.foreground_activated, theme.background_activated
        elif self._state == InputState.FOCUSED:
            fg, bg = theme.foreground_focused, theme.background_focused
        else:
            fg, bg = theme.foreground_focusable, theme.background_focusable

        surface.set_cursor_visible(False)
        surface.move(self.left, self.top)
        surface.set_colors(theme.foreground, theme.background)
        surface.write(PROMPT)

        # Text plus one cell for the cursor
        surface.set_colors(fg, bg)
        surface.write(self._text + " ")

        # Blank out characters left over from longer content
        stale = self._painted_width - len(self._text)
        if stale > 0:
            surface.set_colors(theme.background, theme.background)
            surface.write(" " * stale)
        self._painted_width = len(self._text)

        if self._state == InputState.ACTIVATED:
            surface.move(self.left + len(PROMPT) + len(self._text), self.top)
            surface.set_cursor_visible(True)
