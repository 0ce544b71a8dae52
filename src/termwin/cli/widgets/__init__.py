"""Window elements."""

from termwin.cli.widgets.base import (
    EXIT_TAG,
    Element,
    Focusable,
    Interactive,
    Invocable,
    Renderable,
)
from termwin.cli.widgets.text import Text
from termwin.cli.widgets.button import Button
from termwin.cli.widgets.input_line import Input, InputState
from termwin.cli.widgets.switch import Switch

__all__ = [
    "EXIT_TAG",
    "Element",
    "Focusable",
    "Interactive",
    "Invocable",
    "Renderable",
    "Text",
    "Button",
    "Input",
    "InputState",
    "Switch",
]
