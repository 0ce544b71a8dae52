"""Push button running a callback on Enter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from termwin.cli.core.input import Key, KeyEvent
from termwin.cli.widgets.base import Focusable
from termwin.logging import get_logger

if TYPE_CHECKING:
    from termwin.cli.core.terminal import Surface
    from termwin.core.theme import ColorScheme

logger = get_logger(__name__)


class Button(Focusable):
    """
    Single-line button.

    The action receives the button itself, so callbacks can reach the
    owning window (button.window) to add, remove or report errors.
    """

    def __init__(self, label: str, action: Callable[[Button], None]) -> None:
        super().__init__()
        # Only the first line of a multi-line label is shown
        self.label = label.split("\n")[0]
        self._action = action

    @property
    def width(self) -> int:
        return len(self.label)

    @property
    def height(self) -> int:
        return 1

    def invoke(self) -> None:
        """
        Run the action as if the button was pressed.

        Exceptions from the action are logged and shown on the owning
        window's status line instead of propagating. A detached button has
        nowhere to show them, so they propagate.
        """
        window = self.window if self.attached else None
        try:
            self._action(self)
        except Exception as e:
            if window is None:
                raise
            logger.warning("Action of button %r failed", self.label, exc_info=True)
            window.report_error(str(e) or type(e).__name__)

    def handle_key(self, event: KeyEvent) -> bool:
        if event.key == Key.ENTER:
            self.invoke()
            return True
        return self._navigate(event)

    def _draw(self, surface: Surface, theme: ColorScheme) -> None:
        if self._focused:
            surface.set_colors(theme.foreground_focused, theme.background_focused)
        else:
            surface.set_colors(theme.foreground_focusable, theme.background_focusable)
        surface.set_cursor_visible(False)
        surface.move(self.left, self.top)
        surface.write(self.label)
