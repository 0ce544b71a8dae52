"""Dynamic demo: input rows added and removed while the window runs."""

from __future__ import annotations

from termwin.cli.core.manager import WindowManager
from termwin.cli.core.terminal import Surface
from termwin.cli.core.window import Window, WindowProps
from termwin.cli.demos.calculator import format_number, parse_number
from termwin.cli.widgets import EXIT_TAG, Button, Input, Text
from termwin.core.theme import ColorScheme

LABEL_TAG = "Label"
INPUT_TAG = "Input"
INITIAL_ROWS = 2


def _inputs(window: Window) -> list[Input]:
    return [e for e in window.tagged(INPUT_TAG) if isinstance(e, Input)]


def add_row(button: Button) -> None:
    """Insert a numbered label and input just above the button."""
    window = button.window
    number = len(window.tagged(LABEL_TAG)) + 1
    window.add(Text(f"Number {number}:").with_tag(LABEL_TAG), button)
    window.add(Input().with_tag(INPUT_TAG), button)


def remove_row(button: Button) -> None:
    """Remove the last label/input pair."""
    window = button.window
    labels = window.tagged(LABEL_TAG)
    inputs = window.tagged(INPUT_TAG)
    if not labels:
        window.report_error("Nothing to remove")
        return
    window.remove(labels[-1])
    window.remove(inputs[-1])


def build_dynamic(
    app: WindowManager, theme: ColorScheme, props: WindowProps, surface: Surface
) -> Window:
    """Add any number of inputs and sum them."""
    output = Text("", default="")

    def calculate(button: Button) -> None:
        total = sum(parse_number(field) for field in _inputs(button.window))
        output.write(format_number(total))

    add = Button("Add", add_row)
    window = Window(
        theme, props,
        [
            Button("Exit", lambda button: app.set_running(None)).with_tag(EXIT_TAG),
            Text("Add multiple numbers", 2),
            add,
            Button("Remove", remove_row),
            Text.skip(),
            Button("Calculate", calculate),
            output,
        ],
        surface=surface,
    )
    for _ in range(INITIAL_ROWS):
        add.invoke()
    return window
