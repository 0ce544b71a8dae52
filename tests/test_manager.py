"""Tests for the window manager's serve loop and window switching."""

import pytest

from conftest import ScriptedKeys, keys

from termwin.cli.core.input import Key, KeyEvent
from termwin.cli.core.manager import WindowManager
from termwin.cli.widgets import EXIT_TAG, Button, Text


class TestWindowManager:
    """Tests for WindowManager."""

    def test_escape_on_exit_ends_serve(self, make_window) -> None:
        app = WindowManager(ScriptedKeys(keys(Key.DOWN, Key.ENTER, Key.ESCAPE)))
        counter = []
        window = make_window([
            Button("Exit", lambda b: app.set_running(None)).with_tag(EXIT_TAG),
            Button("Count", lambda b: counter.append(1)),
        ])
        app.set_running(window)
        app.serve()
        assert app.running is None
        assert counter == [1]

    def test_escape_without_focus_still_exits(self, make_window) -> None:
        app = WindowManager(ScriptedKeys(keys(Key.ESCAPE)))
        window = make_window([
            Text("title"),
            Button("Exit", lambda b: app.set_running(None)).with_tag(EXIT_TAG),
        ])
        app.set_running(window)
        window.focus(None)
        app.serve()
        assert app.running is None

    def test_serve_without_window_returns(self) -> None:
        keys_left = ScriptedKeys(keys("x"))
        app = WindowManager(keys_left)
        app.serve()
        assert keys_left.remaining == 1

    def test_none_events_are_polled_again(self, make_window) -> None:
        events = [None, KeyEvent.of(Key.ESCAPE)]
        app = WindowManager(ScriptedKeys(events))
        app.set_running(make_window([
            Button("Exit", lambda b: app.set_running(None)).with_tag(EXIT_TAG),
        ]))
        app.serve()
        assert app.running is None

    def test_switching_windows(self, make_window) -> None:
        app = WindowManager()
        stopped = []
        second = make_window([Button("Back", lambda b: app.set_running(first))], on_stop=stopped.append)
        first = make_window([Button("Open", lambda b: app.set_running(second))], on_stop=stopped.append)

        app.set_running(first)
        assert app.handle_key(KeyEvent.of(Key.ENTER)) is True
        assert app.running is second
        assert stopped == [first]
        assert second.focused is second.elements()[0]

        app.running = first
        assert stopped == [first, second]
        assert app.running is first

    def test_keys_to_no_window(self) -> None:
        assert WindowManager().handle_key(KeyEvent.of(Key.ENTER)) is False

    def test_unstopped_script_fails_loudly(self, make_window) -> None:
        app = WindowManager(ScriptedKeys(keys("a")))
        app.set_running(make_window([Text("no exit")]))
        with pytest.raises(EOFError):
            app.serve()
