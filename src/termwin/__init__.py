"""
termwin - keyboard-driven terminal windows.

Compose a window from stacked elements (text, buttons, inputs and
switches), move focus with the arrow keys and let button actions add or
remove elements, report errors, or switch to another window.

Example:
    >>> from termwin import Button, Text, Window, WindowManager, WindowProps, get_theme
    >>> app = WindowManager()
    >>> out = Text("Nothing yet")
    >>> window = Window(get_theme("green"), WindowProps(60, 30, 1, 2),
    ...                 [Button("Hello", lambda b: out.write("Hello!")), out])
"""

from termwin.core import Canvas, Cell, Color, ColorScheme, THEMES, get_theme
from termwin.cli.core.input import Key, KeyEvent
from termwin.cli.core.window import Window, WindowProps
from termwin.cli.core.manager import WindowManager
from termwin.cli.widgets import (
    EXIT_TAG,
    Button,
    Element,
    Focusable,
    Input,
    InputState,
    Switch,
    Text,
)
from termwin.errors import (
    DuplicateElement,
    InputOverflow,
    InvalidChoices,
    TermwinError,
    Unattached,
    UnknownReference,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Canvas",
    "Cell",
    "Color",
    "ColorScheme",
    "THEMES",
    "get_theme",
    # Windows
    "Key",
    "KeyEvent",
    "Window",
    "WindowProps",
    "WindowManager",
    # Elements
    "EXIT_TAG",
    "Element",
    "Focusable",
    "Text",
    "Button",
    "Input",
    "InputState",
    "Switch",
    # Errors
    "TermwinError",
    "Unattached",
    "DuplicateElement",
    "UnknownReference",
    "InvalidChoices",
    "InputOverflow",
]
