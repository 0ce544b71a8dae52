"""Window: vertically stacked elements with a single keyboard focus.

Elements are laid out top to bottom in sequence order below a one-line
status line. The window holds at most one focused element and keeps
that pointer valid across add() and remove(), including calls made
from inside a button action while a key is being dispatched.
Positions are always resolved by identity at call time, never cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from termwin.cli.core.input import Key, KeyEvent
from termwin.cli.core.terminal import Surface, TerminalSurface
from termwin.cli.widgets.base import EXIT_TAG, Element, Interactive, Invocable
from termwin.cli.widgets.text import Text
from termwin.core.theme import ColorScheme
from termwin.errors import DuplicateElement, UnknownReference
from termwin.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class WindowProps:
    """Window geometry, in character cells."""
    width: int
    height: int
    top_margin: int = 0
    left_margin: int = 0


class Window:
    """
    Container for elements displayed together.

    Example:
        >>> out = Text("Nothing yet")
        >>> window = Window(
        ...     GREEN_THEME, WindowProps(60, 30, 1, 2),
        ...     [Button("Hello", lambda b: out.write("Hello!")), out],
        ... )
    """

    def __init__(
        self,
        theme: ColorScheme,
        props: WindowProps,
        elements: Iterable[Element] = (),
        on_stop: Optional[Callable[[Window], None]] = None,
        surface: Optional[Surface] = None,
    ) -> None:
        self.theme = theme
        self.props = props
        self.on_stop = on_stop
        self.surface: Surface = surface if surface is not None else TerminalSurface()

        self.status_line = Text("", 1)
        self.status_line.attach(self)

        self._elements: list[Element] = []
        self._focused: Optional[Interactive] = None
        for element in elements:
            if element in self:
                raise DuplicateElement(f"{element!r} is listed twice")
            self._adopt(element)
            self._elements.append(element)
        self._layout()

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def elements(self) -> tuple[Element, ...]:
        """Snapshot of the elements in display order (status line excluded)."""
        return tuple(self._elements)

    def tagged(self, tag: str) -> list[Element]:
        """Elements carrying `tag`, in display order."""
        return [e for e in self._elements if tag in e.tags]

    def __contains__(self, element: object) -> bool:
        return any(e is element for e in self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def _index_of(self, element: object) -> int:
        for i, e in enumerate(self._elements):
            if e is element:
                return i
        raise UnknownReference(f"{element!r} does not belong to this window")

    # -------------------------------------------------------------------------
    # Focus
    # -------------------------------------------------------------------------

    @property
    def focused(self) -> Optional[Interactive]:
        return self._focused

    def focus(self, target: Optional[Interactive]) -> None:
        """
        Move focus to `target` (None clears it).

        The previous target is unfocused before the new one is focused;
        focusing the current target again does nothing.
        """
        if target is not None:
            self._index_of(target)
            if not isinstance(target, Interactive):
                raise TypeError(f"{type(target).__name__} cannot take focus")

        current = self._focused
        if target is current:
            return

        self._focused = None
        if current is not None:
            current.unfocus()
        self._focused = target
        if target is not None:
            target.focus()
        logger.debug("Focus %r -> %r", current, target)

    def focus_first(self) -> None:
        for element in self._elements:
            if isinstance(element, Interactive):
                self.focus(element)
                return

    def _focus_index(self) -> int:
        return -1 if self._focused is None else self._index_of(self._focused)

    def next_focusable(self) -> Optional[Interactive]:
        """First focusable after the focused element, by sequence order."""
        for element in self._elements[self._focus_index() + 1:]:
            if isinstance(element, Interactive):
                return element
        return None

    def previous_focusable(self) -> Optional[Interactive]:
        """First focusable before the focused element, by sequence order."""
        index = self._focus_index()
        if index <= 0:
            return None
        for element in reversed(self._elements[:index]):
            if isinstance(element, Interactive):
                return element
        return None

    def _nearest_focusable(self, index: int) -> Optional[Interactive]:
        """Closest focusable to `index`, looking backward first."""
        for element in reversed(self._elements[:index]):
            if isinstance(element, Interactive):
                return element
        for element in self._elements[index + 1:]:
            if isinstance(element, Interactive):
                return element
        return None

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    def _adopt(self, element: Element) -> None:
        # A focusable arriving from elsewhere must not still look focused
        element.detach()
        if isinstance(element, Interactive):
            element.unfocus()
        element.attach(self)

    def add(self, element: Element, before: Optional[Element] = None) -> None:
        """
        Insert `element` before `before`, or at the end.

        Raises:
            DuplicateElement: element is already in the window
            UnknownReference: before is given but not in the window
        """
        if element in self:
            raise DuplicateElement(f"{element!r} is already in this window")
        index = len(self._elements) if before is None else self._index_of(before)

        self._adopt(element)
        self._elements.insert(index, element)
        logger.debug("Added %r at %d", element, index)

        self._layout()
        self.render()

    def remove(self, element: Element, replacement: Optional[Interactive] = None) -> None:
        """
        Remove `element` from the window.

        If it held focus, focus moves to `replacement`, or else to the
        nearest remaining focusable (searching backward, then forward).

        Raises:
            UnknownReference: element, or a given replacement, is not in
                the window (nothing is changed)
        """
        index = self._index_of(element)
        if replacement is not None:
            if replacement is element or replacement not in self:
                raise UnknownReference(f"{replacement!r} cannot take focus after removal")
            if not isinstance(replacement, Interactive):
                raise TypeError(f"{type(replacement).__name__} cannot take focus")

        was_focused = element is self._focused
        fallback: Optional[Interactive] = None
        if was_focused:
            fallback = replacement if replacement is not None else self._nearest_focusable(index)
            self.focus(None)

        del self._elements[index]
        element.detach()
        logger.debug("Removed %r from %d", element, index)

        if was_focused:
            self.focus(fallback)

        self._layout()
        self.render()

    def _layout(self) -> None:
        top = self.props.top_margin
        left = self.props.left_margin
        for element in (self.status_line, *self._elements):
            element.top = top
            element.left = left
            top += element.height

    # -------------------------------------------------------------------------
    # Status line
    # -------------------------------------------------------------------------

    def report_error(self, text: str) -> None:
        """Show `text` on the status line in the error color; '' clears it."""
        if text:
            self.status_line.error(text)
        else:
            self.status_line.write("")

    # -------------------------------------------------------------------------
    # Rendering and lifecycle
    # -------------------------------------------------------------------------

    def render(self) -> None:
        """Repaint the background and every element."""
        surface = self.surface
        surface.set_cursor_visible(False)
        surface.set_colors(self.theme.background, self.theme.background)
        blank = " " * self.props.width
        for y in range(self.props.height):
            surface.move(0, y)
            surface.write(blank)

        self.status_line.render()
        for element in self._elements:
            element.render()
        # Focused element last so an editing input keeps its cursor
        if isinstance(self._focused, Element):
            self._focused.render()

    def start(self) -> None:
        """Show the window: size the surface, focus the first focusable, paint."""
        logger.debug("Starting window with %d elements", len(self._elements))
        self.surface.resize(self.props.width, self.props.height)
        self.focus_first()
        self.render()

    def stop(self) -> None:
        logger.debug("Stopping window")
        if self.on_stop is not None:
            self.on_stop(self)

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> bool:
        """
        Dispatch a key event; returns True if it was consumed.

        Escape first goes to the first element tagged "Exit" if that
        element can be invoked. Everything else goes to the focused element.
        """
        if event.key == Key.ESCAPE:
            exits = self.tagged(EXIT_TAG)
            if exits and isinstance(exits[0], Invocable):
                exits[0].invoke()
                return True

        focused = self._focused
        if focused is None:
            return False
        return focused.handle_key(event)
