"""Keyboard input: key events and a raw stdin reader."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Protocol, runtime_checkable


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    INSERT = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None

    @classmethod
    def of(cls, key: Key) -> KeyEvent:
        """Event for a named key."""
        return cls(key=key)

    @classmethod
    def of_char(cls, char: str) -> KeyEvent:
        """Event for a printable character."""
        return cls(char=char, raw=char)


@runtime_checkable
class KeySource(Protocol):
    """Anything the window manager can poll for key events."""

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        ...


class InputReader:
    """
    Non-blocking keyboard reader for raw-mode stdin.

    Uses os.read() to bypass Python's I/O buffering so escape sequences
    that arrive split across reads can be reassembled.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        # Navigation
        '[H': Key.HOME,
        '[F': Key.END,
        '[1~': Key.HOME,
        '[4~': Key.END,
        '[5~': Key.PAGE_UP,
        '[6~': Key.PAGE_DOWN,
        '[2~': Key.INSERT,
        '[3~': Key.DELETE,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
    }

    ESCAPE_WAIT = 0.1  # seconds to wait for the rest of a lone ESC

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = fd

    @property
    def fd(self) -> int:
        if self._fd is None:
            self._fd = sys.stdin.fileno()
        return self._fd

    def feed(self, data: str) -> None:
        """Queue input as if it had been typed."""
        self._buffer += data

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """
        Read a single key event.

        Returns None if no input is available within timeout.
        """
        while True:
            if not self._buffer:
                if not self._has_input(timeout):
                    return None
                self._read_available()
                if not self._buffer:
                    return None
            event = self._next_event()
            if event is not None:
                return event
            # Unknown control character was skipped; try the rest

    def _read_available(self) -> None:
        """Read whatever stdin has right now, waiting briefly after a lone ESC."""
        self._buffer += self._read_chunk()
        if self._buffer == '\x1b':
            deadline = time.monotonic() + self.ESCAPE_WAIT
            while time.monotonic() < deadline:
                if not self._has_input(min(0.025, max(0.0, deadline - time.monotonic()))):
                    continue
                self._buffer += self._read_chunk()
                rest = self._buffer[1:]
                if rest and (rest[-1].isalpha() or rest[-1] == '~' or rest in self.SEQUENCES):
                    return

    def _read_chunk(self) -> str:
        try:
            return os.read(self.fd, 1024).decode('utf-8', errors='replace')
        except (OSError, BlockingIOError):
            return ""

    def _next_event(self) -> Optional[KeyEvent]:
        """Consume one event from the front of the buffer."""
        head = self._buffer[0]

        if head in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=self.SIMPLE_KEYS[head], raw=head)

        if head == '\x1b':
            return self._parse_escape_sequence()

        self._buffer = self._buffer[1:]
        if head.isprintable():
            return KeyEvent(char=head, raw=head)
        return None

    def _parse_escape_sequence(self) -> KeyEvent:
        """Parse an escape sequence from the front of the buffer."""
        rest = self._buffer[1:]

        if not rest or rest[0] == '\x1b':
            self._buffer = rest
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        if rest[0] == '[':
            # CSI: parameters up to a final letter or ~
            end = len(rest)
            for i in range(1, len(rest)):
                ch = rest[i]
                if ch == '\x1b':
                    end = i
                    break
                if ch.isalpha() or ch == '~':
                    end = i + 1
                    break
        elif rest[0] == 'O' and len(rest) > 1:
            # SS3: exactly one final character
            end = 2
        else:
            # Alt+char
            end = 1

        seq = rest[:end]
        self._buffer = rest[end:]
        return KeyEvent(key=self.SEQUENCES.get(seq), raw='\x1b' + seq)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self.fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
