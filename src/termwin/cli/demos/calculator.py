"""Calculator demo: a menu window switching to one window per operation."""

from __future__ import annotations

import math
from typing import Callable, Optional

from termwin.cli.core.manager import WindowManager
from termwin.cli.core.terminal import Surface
from termwin.cli.core.window import Window, WindowProps
from termwin.cli.widgets import EXIT_TAG, Button, Input, Text
from termwin.core.theme import ColorScheme

Operation = Callable[[float, float], float]


def format_number(value: float) -> str:
    """Show integral results without a trailing '.0'."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return str(value)


def parse_number(field: Input) -> float:
    try:
        return float(field.text)
    except ValueError:
        raise ValueError(f"Not a number: {field.text!r}") from None


def _divide(a: float, b: float) -> float:
    return math.nan if b == 0 else a / b


OPERATIONS: dict[str, Operation] = {
    "Addition": lambda a, b: a + b,
    "Subtraction": lambda a, b: a - b,
    "Multiplication": lambda a, b: a * b,
    "Division": _divide,
    "Power": math.pow,
}


def reset_form(window: Window) -> None:
    """on_stop handler: put every element and the status line back to default."""
    window.report_error("")
    for element in window.elements():
        element.reset()


def _operation_window(
    title: str,
    operation: Operation,
    back: Callable[[Button], None],
    theme: ColorScheme,
    props: WindowProps,
    surface: Surface,
) -> Window:
    operand1 = Input()
    operand2 = Input()
    result = Text("", 1, "")

    def calculate(button: Button) -> None:
        value = operation(parse_number(operand1), parse_number(operand2))
        result.write(format_number(value))

    return Window(
        theme, props,
        [
            Button("Back", back).with_tag(EXIT_TAG),
            Text.skip(1),
            Text(title, 2),
            Text("Number 1:"),
            operand1,
            Text("Number 2:"),
            operand2,
            Text.skip(1),
            Button("Calculate", calculate),
            result,
        ],
        on_stop=reset_form,
        surface=surface,
    )


def build_calculator(
    app: WindowManager, theme: ColorScheme, props: WindowProps, surface: Surface
) -> Window:
    """Menu of arithmetic operations, each in its own window."""
    main_window: Optional[Window] = None

    def back(button: Button) -> None:
        app.set_running(main_window)

    operation_windows = {
        title: _operation_window(title, operation, back, theme, props, surface)
        for title, operation in OPERATIONS.items()
    }

    def opener(title: str) -> Callable[[Button], None]:
        return lambda button: app.set_running(operation_windows[title])

    main_window = Window(
        theme, props,
        [
            Button("Exit", lambda button: app.set_running(None)).with_tag(EXIT_TAG),
            Text.skip(1),
            Text("Calculator", 2),
            *(Button(title, opener(title)) for title in OPERATIONS),
        ],
        surface=surface,
    )
    return main_window
