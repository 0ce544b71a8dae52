"""Small demos: counters, echo and a switch."""

from __future__ import annotations

from termwin.cli.core.manager import WindowManager
from termwin.cli.core.terminal import Surface
from termwin.cli.core.window import Window, WindowProps
from termwin.cli.widgets import EXIT_TAG, Button, Input, Switch, Text
from termwin.core.theme import ColorScheme


def _exit_button(app: WindowManager) -> Button:
    return Button("Exit", lambda button: app.set_running(None)).with_tag(EXIT_TAG)


def _bump(counter: Text) -> None:
    """Increment the number at the end of a 'label: N' text."""
    label, _, count = counter.text.rpartition(" ")
    counter.write(f"{label} {int(count) + 1}")


def build_clicker(
    app: WindowManager, theme: ColorScheme, props: WindowProps, surface: Surface
) -> Window:
    """Two buttons, each counting its own presses."""
    output1 = Text("Button 1 pressed: 0")
    output2 = Text("Button 2 pressed: 0")
    return Window(
        theme, props,
        [
            _exit_button(app),
            Text("My terminal program", 2),
            Button("Button 1", lambda button: _bump(output1)),
            output1,
            Button("Button 2", lambda button: _bump(output2)),
            output2,
        ],
        surface=surface,
    )


def build_echo(
    app: WindowManager, theme: ColorScheme, props: WindowProps, surface: Surface
) -> Window:
    """Type into an input and print it back."""
    line = Input()
    output = Text("You have not printed anything yet")

    def print_line(button: Button) -> None:
        output.write(f"You've written: {line.text}")
        line.clear()

    return Window(
        theme, props,
        [
            _exit_button(app),
            Text("Echo terminal", 2),
            line,
            Button("Print", print_line),
            output,
        ],
        surface=surface,
    )


def build_switch(
    app: WindowManager, theme: ColorScheme, props: WindowProps, surface: Surface
) -> Window:
    """Pick one of three choices and print the selection."""
    choices = Switch(["Choice 1", "Choice 2", "Choice 3"])
    output = Text("", default="")
    return Window(
        theme, props,
        [
            _exit_button(app),
            Text("Switch!", 2),
            choices,
            Button("Print", lambda button: output.write(f"You've chosen: {choices.chosen}")),
            output,
        ],
        surface=surface,
    )
