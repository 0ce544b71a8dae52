"""Static text block with a fixed line budget."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from termwin.cli.widgets.base import Element

if TYPE_CHECKING:
    from termwin.cli.core.terminal import Surface
    from termwin.core.theme import ColorScheme


class Text(Element):
    """
    Non-focusable text occupying a fixed number of lines.

    Content longer than the line budget is clamped to its first
    `height` lines on every write; nothing is raised.
    """

    def __init__(
        self,
        text: str,
        max_height: Optional[int] = None,
        default: Optional[str] = None,
    ) -> None:
        """
        Args:
            text: Initial content
            max_height: Lines reserved for the element (default: lines in text)
            default: Content restored by reset() (default: text)
        """
        super().__init__()
        self._height = max_height if max_height is not None else len(text.split("\n"))
        if self._height < 1:
            raise ValueError(f"Text height must be at least 1, got {self._height}")
        self._text = self._clamp(text)
        self._default = text if default is None else default
        self._error = False
        self._painted_width = 0

    @classmethod
    def skip(cls, height: int = 1) -> Text:
        """Blank spacer occupying `height` lines."""
        return cls("", height)

    @property
    def text(self) -> str:
        return self._text

    @property
    def default(self) -> str:
        return self._default

    @property
    def is_error(self) -> bool:
        """Whether the content is shown in the error color."""
        return self._error

    @property
    def width(self) -> int:
        return max(len(line) for line in self._text.split("\n"))

    @property
    def height(self) -> int:
        return self._height

    def _clamp(self, text: str) -> str:
        return "\n".join(text.split("\n")[:self._height])

    def write(self, text: str) -> None:
        """Replace the content (clamped to the line budget) in the normal color."""
        self._text = self._clamp(text)
        self._error = False
        self._refresh()

    def append(self, text: str) -> None:
        """Append to the content, then clamp again."""
        self._text = self._clamp(self._text + text)
        self._refresh()

    def error(self, text: str) -> None:
        """Replace the content and show it in the theme's error color."""
        self._text = self._clamp(text)
        self._error = True
        self._refresh()

    def reset(self) -> None:
        self.write(self._default)

    def _draw(self, surface: Surface, theme: ColorScheme) -> None:
        fg = theme.foreground_error if self._error else theme.foreground
        lines = self._text.split("\n")
        span = max(self._painted_width, self.width)

        surface.set_cursor_visible(False)
        for row in range(self._height):
            line = lines[row] if row < len(lines) else ""
            surface.move(self.left, self.top + row)
            surface.set_colors(fg, theme.background)
            # Pad over whatever the previous content left behind
            surface.write(line.ljust(span))
        self._painted_width = self.width
