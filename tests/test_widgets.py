"""Tests for Text, Button, Input and Switch elements."""

import pytest

from conftest import keys

from termwin.cli.core.input import Key, KeyEvent
from termwin.cli.core.window import Window, WindowProps
from termwin.cli.widgets import (
    Button,
    Input,
    InputState,
    Interactive,
    Invocable,
    Renderable,
    Switch,
    Text,
)
from termwin.cli.widgets.input_line import OVERFLOW_MESSAGE
from termwin.core.canvas import Canvas
from termwin.errors import InputOverflow, InvalidChoices, Unattached


def press(window: Window, *items) -> list[bool]:
    return [window.handle_key(event) for event in keys(*items)]


class TestText:
    """Tests for Text."""

    def test_height_defaults_to_line_count(self) -> None:
        assert Text("a\nbb\nc").height == 3
        assert Text("abc").width == 3
        assert Text("a\nbbbb").width == 4

    def test_clamped_to_height(self) -> None:
        text = Text("one\ntwo\nthree", 2)
        assert text.text == "one\ntwo"
        text.write("a\nb\nc\nd")
        assert text.text == "a\nb"
        text.append("\nextra")
        assert text.text == "a\nb"

    def test_invalid_height(self) -> None:
        with pytest.raises(ValueError):
            Text("x", 0)

    def test_write_and_append(self) -> None:
        text = Text("Hello")
        text.append(", world")
        assert text.text == "Hello, world"

    def test_error_and_reset(self) -> None:
        text = Text("Initial", default="Default")
        text.error("Broken")
        assert text.is_error
        text.write("Fine")
        assert not text.is_error
        text.reset()
        assert text.text == "Default"

    def test_default_falls_back_to_initial_text(self) -> None:
        text = Text("Initial")
        text.write("Changed")
        text.reset()
        assert text.text == "Initial"

    def test_skip(self) -> None:
        spacer = Text.skip(3)
        assert spacer.height == 3
        assert spacer.text == ""

    def test_render_requires_window(self) -> None:
        with pytest.raises(Unattached):
            Text("x").render()

    def test_detached_writes_are_kept(self) -> None:
        text = Text("x")
        text.write("y")
        assert text.text == "y"

    def test_shorter_write_clears_old_content(self, make_window, canvas: Canvas, theme) -> None:
        text = Text("A much longer line")
        window = make_window([text])
        window.render()
        assert canvas.line(1) == "A much longer line"
        text.write("Short")
        assert canvas.line(1) == "Short"

    def test_error_color(self, make_window, canvas: Canvas, theme) -> None:
        text = Text("ok")
        window = make_window([text])
        window.render()
        text.error("bad")
        assert canvas[0, 1].fg == theme.foreground_error
        text.write("good")
        assert canvas[0, 1].fg == theme.foreground


class TestButton:
    """Tests for Button."""

    def test_label(self) -> None:
        button = Button("Press\nignored", lambda b: None)
        assert button.label == "Press"
        assert (button.width, button.height) == (5, 1)
        assert button.focusable

    def test_enter_invokes(self, make_window) -> None:
        pressed = []
        button = Button("Go", lambda b: pressed.append(b))
        window = make_window([button])
        window.start()
        assert press(window, Key.ENTER) == [True]
        assert pressed == [button]

    def test_other_keys_not_consumed(self, make_window) -> None:
        window = make_window([Button("Go", lambda b: None)])
        window.start()
        assert press(window, "x", Key.LEFT) == [False, False]

    def test_failing_action_reports_error(self, make_window) -> None:
        def fail(button: Button) -> None:
            raise ValueError("Something broke")

        window = make_window([Button("Fail", fail)])
        window.start()
        assert press(window, Key.ENTER) == [True]
        assert window.status_line.text == "Something broke"
        assert window.status_line.is_error

    def test_failing_action_without_message(self, make_window) -> None:
        def fail(button: Button) -> None:
            raise KeyError()

        button = Button("Fail", fail)
        window = make_window([button])
        window.start()
        button.invoke()
        assert window.status_line.text == "KeyError"

    def test_detached_failure_propagates(self) -> None:
        def fail(button: Button) -> None:
            raise RuntimeError("nowhere to show")

        with pytest.raises(RuntimeError):
            Button("Fail", fail).invoke()

    def test_focus_colors(self, make_window, canvas: Canvas, theme) -> None:
        first = Button("One", lambda b: None)
        second = Button("Two", lambda b: None)
        window = make_window([first, second])
        window.start()
        assert canvas[0, 1].bg == theme.background_focused
        assert canvas[0, 2].bg == theme.background_focusable
        press(window, Key.DOWN)
        assert canvas[0, 1].bg == theme.background_focusable
        assert canvas[0, 2].bg == theme.background_focused


class TestInput:
    """Tests for Input."""

    def test_state_cycle(self, make_window) -> None:
        field = Input()
        window = make_window([field])
        assert field.state == InputState.UNFOCUSED
        window.start()
        assert field.state == InputState.FOCUSED
        press(window, Key.ENTER)
        assert field.state == InputState.ACTIVATED
        press(window, Key.ENTER)
        assert field.state == InputState.FOCUSED
        window.focus(None)
        assert field.state == InputState.UNFOCUSED

    def test_typing_only_while_activated(self, make_window) -> None:
        field = Input()
        window = make_window([field])
        window.start()
        assert press(window, "a") == [False]
        assert field.text == ""
        press(window, Key.ENTER, "abc", Key.BACKSPACE, "d")
        assert field.text == "abd"

    def test_backspace_on_empty_is_consumed(self, make_window) -> None:
        field = Input()
        window = make_window([field])
        window.start()
        press(window, Key.ENTER)
        assert press(window, Key.BACKSPACE) == [True]
        assert field.text == ""
        assert field.activated

    def test_navigation_while_activated(self, make_window) -> None:
        field = Input()
        button = Button("Next", lambda b: None)
        window = make_window([field, button])
        window.start()
        press(window, Key.ENTER, "x", Key.DOWN)
        assert window.focused is button
        assert field.state == InputState.UNFOCUSED
        assert field.text == "x"

    def test_render(self, make_window, canvas: Canvas, theme) -> None:
        field = Input("hi")
        window = make_window([field])
        window.start()
        assert canvas.line(1) == ">: hi"
        assert canvas[0, 1].fg == theme.foreground
        assert canvas[3, 1].bg == theme.background_focused
        press(window, Key.ENTER, "!")
        assert canvas.line(1) == ">: hi!"
        assert canvas[3, 1].bg == theme.background_activated
        assert canvas.cursor_visible
        assert (canvas.cursor_x, canvas.cursor_y) == (6, 1)
        press(window, Key.BACKSPACE, Key.BACKSPACE)
        assert canvas.line(1) == ">: h"

    def test_clear_and_reset(self) -> None:
        field = Input("abc")
        field.clear()
        assert field.text == ""
        field.append("x")
        field.reset()
        assert field.text == ""

    def test_overflow(self, theme) -> None:
        canvas = Canvas(10, 5)
        field = Input()
        window = Window(theme, WindowProps(10, 5, 0, 2), [field], surface=canvas)
        window.start()
        press(window, Key.ENTER, "1234")
        assert field.text == "1234"
        assert canvas.line(field.top) == "  >: 1234"
        assert not window.status_line.text

        assert press(window, "5") == [True]
        assert field.text == "1234"
        assert window.status_line.text == OVERFLOW_MESSAGE
        assert window.status_line.is_error
        assert field.activated

    def test_last_accepted_character_is_visible(self, theme) -> None:
        canvas = Canvas(20, 5)
        field = Input()
        window = Window(theme, WindowProps(20, 5, 0, 2), [field], surface=canvas)
        window.start()
        typed = "ABCDEFGHIJKLMNOPQRS"
        press(window, Key.ENTER, typed)
        assert field.text == typed[:14]
        assert canvas.line(field.top) == "  >: " + typed[:14]
        assert canvas.cursor_x == 19
        assert window.status_line.text == OVERFLOW_MESSAGE

    def test_append_raises_overflow(self, theme) -> None:
        field = Input("123456789")
        window = Window(theme, WindowProps(10, 5, 0, 2), [field], surface=Canvas(10, 5))
        assert field.window is window
        with pytest.raises(InputOverflow) as excinfo:
            field.append("0")
        assert excinfo.value.limit == 10
        assert excinfo.value.length == 10
        assert field.text == "123456789"

    def test_overflow_depends_on_position(self, theme) -> None:
        field = Input("123456")
        window = Window(theme, WindowProps(10, 5), [field], surface=Canvas(10, 5))
        assert field.window is window
        with pytest.raises(InputOverflow):
            field.append("7")
        window.remove(field)
        field.append("7")
        assert field.text == "1234567"


class TestSwitch:
    """Tests for Switch."""

    def test_invalid_choices(self) -> None:
        with pytest.raises(InvalidChoices):
            Switch([])
        with pytest.raises(InvalidChoices):
            Switch(["a", "b"], 2)
        with pytest.raises(ValueError):
            Switch(["a"], -1)

    def test_width(self) -> None:
        assert Switch(["ab", "cde"]).width == 6

    def test_left_right_stop_at_ends(self, make_window) -> None:
        switch = Switch(["a", "b", "c"])
        window = make_window([switch])
        window.start()
        assert press(window, Key.LEFT) == [True]
        assert switch.chosen_index == 0
        assert press(window, Key.RIGHT, Key.RIGHT, Key.RIGHT) == [True, True, True]
        assert switch.chosen == "c"
        press(window, Key.LEFT)
        assert switch.chosen == "b"

    def test_reset(self) -> None:
        switch = Switch(["a", "b", "c"], 2)
        switch.reset()
        assert switch.chosen_index == 0

    def test_render(self, make_window, canvas: Canvas, theme) -> None:
        switch = Switch(["ab", "cd"], 1)
        window = make_window([Button("x", lambda b: None), switch])
        window.start()
        assert canvas.line(2) == "ab cd"
        assert canvas[0, 2].bg == theme.background_focusable
        assert canvas[3, 2].fg == theme.foreground_chosen
        window.handle_key(KeyEvent.of(Key.DOWN))
        assert canvas[3, 2].bg == theme.background_focused


class TestProtocols:
    """Structural checks the window relies on."""

    def test_every_element_is_renderable(self) -> None:
        for element in (Text(""), Text.skip(2), Button("Go", lambda b: None), Input(), Switch(["a"])):
            assert isinstance(element, Renderable)
        assert not isinstance("plain text", Renderable)

    def test_focusable_elements_are_interactive(self) -> None:
        assert isinstance(Input(), Interactive)
        assert isinstance(Switch(["a"]), Interactive)
        assert not isinstance(Text("static"), Interactive)

    def test_only_buttons_are_invocable(self) -> None:
        assert isinstance(Button("Go", lambda b: None), Invocable)
        assert not isinstance(Input(), Invocable)
