"""Core TUI infrastructure - terminal I/O and input handling.

Window and WindowManager live in termwin.cli.core.window and
termwin.cli.core.manager; they depend on the element classes, which in
turn depend on this package.
"""

from termwin.cli.core.terminal import Surface, Terminal, TerminalSize, TerminalSurface
from termwin.cli.core.input import InputReader, KeyEvent, Key, KeySource

__all__ = [
    "Surface",
    "Terminal",
    "TerminalSize",
    "TerminalSurface",
    "InputReader",
    "KeyEvent",
    "Key",
    "KeySource",
]
