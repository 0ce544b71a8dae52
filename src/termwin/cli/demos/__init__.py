"""Bundled demo applications built on termwin windows."""

from __future__ import annotations

from typing import Callable

from termwin.cli.core.manager import WindowManager
from termwin.cli.core.terminal import Surface
from termwin.cli.core.window import Window, WindowProps
from termwin.cli.demos.basic import build_clicker, build_echo, build_switch
from termwin.cli.demos.calculator import build_calculator
from termwin.cli.demos.coffee import build_coffee
from termwin.cli.demos.dynamic import build_dynamic
from termwin.core.theme import ColorScheme

DemoBuilder = Callable[[WindowManager, ColorScheme, WindowProps, Surface], Window]

DEMOS: dict[str, DemoBuilder] = {
    "clicker": build_clicker,
    "echo": build_echo,
    "calculator": build_calculator,
    "switch": build_switch,
    "dynamic": build_dynamic,
    "coffee": build_coffee,
}


def get_demo(name: str) -> DemoBuilder:
    try:
        return DEMOS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"No such demo: {name!r}") from None


def describe(builder: DemoBuilder) -> str:
    """First line of the builder's docstring."""
    return (builder.__doc__ or "").strip().split("\n")[0]


__all__ = ["DEMOS", "DemoBuilder", "describe", "get_demo"]
