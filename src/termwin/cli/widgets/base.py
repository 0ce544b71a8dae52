"""Element capabilities and the shared base classes."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Protocol, TypeVar, runtime_checkable

from termwin.cli.core.input import Key, KeyEvent
from termwin.errors import Unattached

if TYPE_CHECKING:
    from termwin.cli.core.terminal import Surface
    from termwin.cli.core.window import Window
    from termwin.core.theme import ColorScheme

EXIT_TAG = "Exit"

E = TypeVar("E", bound="Element")


@runtime_checkable
class Renderable(Protocol):
    """Anything a window can lay out and draw."""

    @property
    def width(self) -> int:
        ...

    @property
    def height(self) -> int:
        ...

    def render(self) -> None:
        ...


@runtime_checkable
class Interactive(Protocol):
    """Elements that can own keyboard focus."""

    def focus(self) -> None:
        ...

    def unfocus(self) -> None:
        ...

    def handle_key(self, event: KeyEvent) -> bool:
        ...


@runtime_checkable
class Invocable(Protocol):
    """Elements that can be pressed programmatically (Escape targets)."""

    def invoke(self) -> None:
        ...


class Element(ABC):
    """
    Base class for everything shown inside a window.

    Position (top/left) is assigned by the owning window's layout. The
    window itself is held through a weak reference; an element never
    keeps its window alive.
    """

    def __init__(self) -> None:
        self.top = 0
        self.left = 0
        self.tags: set[str] = set()
        self._window_ref: Optional[weakref.ref[Window]] = None

    def with_tag(self: E, *tags: str) -> E:
        """Add tags and return self, for use inside constructor calls."""
        self.tags.update(tags)
        return self

    @property
    @abstractmethod
    def width(self) -> int:
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        ...

    @property
    def focusable(self) -> bool:
        return False

    # -------------------------------------------------------------------------
    # Window attachment
    # -------------------------------------------------------------------------

    @property
    def attached(self) -> bool:
        return self._window_ref is not None and self._window_ref() is not None

    @property
    def window(self) -> Window:
        """Owning window; raises Unattached if there is none."""
        window = self._window_ref() if self._window_ref is not None else None
        if window is None:
            raise Unattached(self)
        return window

    def attach(self, window: Window) -> None:
        self._window_ref = weakref.ref(window)

    def detach(self) -> None:
        self._window_ref = None

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self) -> None:
        """Draw at the current position with the owning window's theme."""
        window = self.window
        self._draw(window.surface, window.theme)

    @abstractmethod
    def _draw(self, surface: Surface, theme: ColorScheme) -> None:
        ...

    def _refresh(self) -> None:
        """Re-render if on screen; content changes on detached elements are kept silently."""
        if self.attached:
            self.render()

    def reset(self) -> None:
        """Return to the default state."""
        self._refresh()


class Focusable(Element):
    """
    Base class for elements that can receive keyboard focus.

    focus() and unfocus() are driven by the owning window; entering the
    state the element is already in does nothing.
    """

    def __init__(self) -> None:
        super().__init__()
        self._focused = False

    @property
    def focusable(self) -> bool:
        return True

    @property
    def focused(self) -> bool:
        return self._focused

    def focus(self) -> None:
        if self._focused:
            return
        self._focused = True
        self._refresh()

    def unfocus(self) -> None:
        if not self._focused:
            return
        self._focused = False
        self._refresh()

    def handle_key(self, event: KeyEvent) -> bool:
        """Handle a key; returns True if consumed."""
        return self._navigate(event)

    def _navigate(self, event: KeyEvent) -> bool:
        """Up/Down move focus through the window; consumed even at the ends."""
        if event.key == Key.UP:
            target = self.window.previous_focusable()
        elif event.key == Key.DOWN:
            target = self.window.next_focusable()
        else:
            return False

        if target is not None:
            self.window.focus(target)
        return True
