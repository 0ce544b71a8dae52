"""
Logging utilities for termwin.

The package logger ships with a NullHandler: a full-screen window owns
the terminal, so nothing is printed unless setup_logging() routes
records somewhere (usually a file).
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

# Package root logger
_root_logger = logging.getLogger("termwin")
_root_logger.addHandler(logging.NullHandler())

# Level to restore on enable(); None while logging is on
_saved_level: int | None = None


def setup_logging(
    level: str | int = "INFO",
    format: str | None = None,
    stream: TextIO | None = None,
    file: str | None = None,
) -> None:
    """
    Configure logging for termwin.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int
        format: Custom log format string
        stream: Output stream; only used when no file is given
        file: Optional file path to write logs

    Example:
        from termwin.logging import setup_logging

        # Keep the screen clean while a window is running
        setup_logging("DEBUG", file="termwin.log")
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    _root_logger.setLevel(level)
    _root_logger.handlers.clear()

    if format is None:
        format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    formatter = logging.Formatter(format)

    if file:
        handler: logging.Handler = logging.FileHandler(file)
    else:
        handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(level)
    _root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a submodule.

    Example:
        logger = get_logger("window")
        logger.debug("Focus moved")
    """
    if name == "termwin" or name.startswith("termwin."):
        return logging.getLogger(name)
    return logging.getLogger(f"termwin.{name}")


def set_level(level: str | int) -> None:
    """Set the log level for termwin."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    _root_logger.setLevel(level)


def disable() -> None:
    """
    Disable all logging for termwin.

    Child loggers inherit the raised level, so records from every
    termwin.* logger are dropped.
    """
    global _saved_level
    if _saved_level is None:
        _saved_level = _root_logger.level
    _root_logger.setLevel(logging.CRITICAL + 1)


def enable() -> None:
    """Re-enable logging for termwin."""
    global _saved_level
    if _saved_level is not None:
        _root_logger.setLevel(_saved_level)
        _saved_level = None
