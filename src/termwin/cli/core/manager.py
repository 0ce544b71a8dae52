"""Window manager: owns the running window and the input loop."""

from __future__ import annotations

from typing import Optional

from termwin.cli.core.input import InputReader, KeyEvent, KeySource
from termwin.cli.core.window import Window
from termwin.logging import get_logger

logger = get_logger(__name__)


class WindowManager:
    """
    Runs one window at a time.

    Switching windows (usually from a button action) stops the old
    window and starts the new one; setting None ends serve().

    Example:
        >>> app = WindowManager()
        >>> app.set_running(main_window)
        >>> with Terminal.managed_mode():
        ...     app.serve()
    """

    POLL_INTERVAL = 0.05

    def __init__(self, keys: Optional[KeySource] = None) -> None:
        self._keys = keys
        self._running: Optional[Window] = None

    @property
    def running(self) -> Optional[Window]:
        return self._running

    @running.setter
    def running(self, window: Optional[Window]) -> None:
        self.set_running(window)

    def set_running(self, window: Optional[Window]) -> None:
        """Swap the displayed window; None stops serving after the current key."""
        previous = self._running
        if previous is not None:
            previous.stop()
        self._running = window
        if window is not None:
            window.start()
            window.surface.flush()
        logger.debug("Running window changed: %r -> %r", previous, window)

    @property
    def keys(self) -> KeySource:
        if self._keys is None:
            self._keys = InputReader()
        return self._keys

    def handle_key(self, event: KeyEvent) -> bool:
        """Forward a key to the running window; returns True if consumed."""
        window = self._running
        if window is None:
            return False
        consumed = window.handle_key(event)
        window.surface.flush()
        # The key may have switched windows
        if self._running is not None and self._running is not window:
            self._running.surface.flush()
        return consumed

    def serve(self) -> None:
        """Poll for keys and dispatch them until no window is running."""
        keys = self.keys
        while self._running is not None:
            event = keys.read(timeout=self.POLL_INTERVAL)
            if event is not None:
                self.handle_key(event)
        logger.debug("Serve loop finished")
