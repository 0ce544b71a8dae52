"""Low-level terminal operations and the Surface windows draw on."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, TextIO, runtime_checkable

from termwin.core.color import Color


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


@runtime_checkable
class Surface(Protocol):
    """Character grid that elements render onto (0-indexed coordinates)."""

    @property
    def width(self) -> int:
        ...

    @property
    def height(self) -> int:
        ...

    def move(self, x: int, y: int) -> None:
        ...

    def set_colors(self, fg: Color, bg: Color) -> None:
        ...

    def write(self, text: str) -> None:
        ...

    def set_cursor_visible(self, visible: bool) -> None:
        ...

    def resize(self, width: int, height: int) -> None:
        ...

    def flush(self) -> None:
        ...


class Terminal:
    """Terminal I/O helpers for TUI applications."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def clear() -> None:
        """Clear screen and move cursor to home."""
        sys.stdout.write('\x1b[2J\x1b[H')
        sys.stdout.flush()

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        sys.stdout.write('\x1b[0m')
        sys.stdout.flush()

    @staticmethod
    def hide_cursor() -> None:
        sys.stdout.write('\x1b[?25l')
        sys.stdout.flush()

    @staticmethod
    def show_cursor() -> None:
        sys.stdout.write('\x1b[?25h')
        sys.stdout.flush()

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows: no termios, input stays line-buffered
            yield
            return
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def alternate_screen() -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        sys.stdout.write('\x1b[?1049h')
        sys.stdout.flush()
        try:
            yield
        finally:
            sys.stdout.write('\x1b[?1049l')
            sys.stdout.flush()

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """Full TUI mode: alternate screen, hidden cursor, raw input."""
        with Terminal.alternate_screen():
            Terminal.hide_cursor()
            try:
                with Terminal.raw_mode():
                    yield
            finally:
                Terminal.show_cursor()
                Terminal.reset()


class TerminalSurface:
    """
    Surface backed by ANSI escape sequences.

    Output is buffered by the stream until flush(); the window manager
    flushes once per dispatched key.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream or sys.stdout
        self._width: Optional[int] = None
        self._height: Optional[int] = None

    @property
    def width(self) -> int:
        cols = Terminal.size().cols
        if self._width is not None:
            return min(self._width, cols)
        return cols

    @property
    def height(self) -> int:
        rows = Terminal.size().rows
        if self._height is not None:
            return min(self._height, rows)
        return rows

    def move(self, x: int, y: int) -> None:
        # CUP is 1-indexed
        self._stream.write(f'\x1b[{y + 1};{x + 1}H')

    def set_colors(self, fg: Color, bg: Color) -> None:
        self._stream.write(f'\x1b[{fg.to_sgr_fg()};{bg.to_sgr_bg()}m')

    def write(self, text: str) -> None:
        self._stream.write(text)

    def set_cursor_visible(self, visible: bool) -> None:
        self._stream.write('\x1b[?25h' if visible else '\x1b[?25l')

    def resize(self, width: int, height: int) -> None:
        """Ask the emulator to resize (xterm window op) and clip to that size."""
        self._stream.write(f'\x1b[8;{height};{width}t')
        self._width = width
        self._height = height

    def flush(self) -> None:
        self._stream.flush()
