"""
Configuration for termwin applications.

Settings come from a JSON file, with environment variables taking
precedence:

    {
        "theme": "dark_blue",
        "width": 60,
        "height": 30,
        "top_margin": 1,
        "left_margin": 2,
        "colors": {"foreground_error": "bright_yellow"},
        "log_level": "DEBUG",
        "log_file": "~/termwin.log"
    }
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from termwin.cli.core.window import WindowProps
from termwin.core.theme import ColorScheme, get_theme

CONFIG_ENV = "TERMWIN_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "termwin" / "config.json"

# Environment variable -> config field
ENV_OVERRIDES = {
    "TERMWIN_THEME": "theme",
    "TERMWIN_LOG_LEVEL": "log_level",
    "TERMWIN_LOG_FILE": "log_file",
}


@dataclass
class TermwinConfig:
    """Window geometry, theme and logging settings."""

    theme: str = "green"
    width: int = 60
    height: int = 30
    top_margin: int = 1
    left_margin: int = 2
    colors: dict[str, str | int] = field(default_factory=dict)  # Role overrides
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TermwinConfig:
        """Build from parsed JSON, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        config = cls(**data)
        config.validate()
        return config

    def validate(self) -> None:
        for name in ("width", "height", "top_margin", "left_margin"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        if self.width == 0 or self.height == 0:
            raise ValueError("width and height must be positive")
        # Fail early on bad theme names or color overrides
        self.scheme()

    def props(self) -> WindowProps:
        return WindowProps(self.width, self.height, self.top_margin, self.left_margin)

    def scheme(self) -> ColorScheme:
        scheme = get_theme(self.theme)
        if self.colors:
            scheme = scheme.with_overrides(self.colors)
        return scheme

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def config_path() -> Path:
    """Config file location: $TERMWIN_CONFIG or ~/.config/termwin/config.json."""
    if env_path := os.environ.get(CONFIG_ENV):
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[Path] = None) -> TermwinConfig:
    """
    Load configuration.

    A missing file gives the defaults; a file that exists but cannot be
    parsed raises ValueError.
    """
    path = Path(path).expanduser() if path is not None else config_path()

    data: dict[str, Any] = {}
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a JSON object")

    for env_name, key in ENV_OVERRIDES.items():
        if value := os.environ.get(env_name):
            data[key] = value

    return TermwinConfig.from_dict(data)
