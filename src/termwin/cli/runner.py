"""Run demos on the terminal or render them off-screen."""

from __future__ import annotations

from termwin.cli.core.manager import WindowManager
from termwin.cli.core.terminal import Terminal, TerminalSurface
from termwin.cli.demos import get_demo
from termwin.config import TermwinConfig
from termwin.core.canvas import Canvas
from termwin.logging import get_logger, setup_logging

logger = get_logger(__name__)


def run_demo(name: str, config: TermwinConfig) -> None:
    """Run a demo full-screen until its Exit control stops the manager."""
    if config.log_file:
        setup_logging(config.log_level, file=config.log_file)

    builder = get_demo(name)
    app = WindowManager()
    window = builder(app, config.scheme(), config.props(), TerminalSurface())

    logger.info("Starting demo %s", name)
    with Terminal.managed_mode():
        app.set_running(window)
        app.serve()
    logger.info("Demo %s finished", name)


def snapshot_demo(name: str, config: TermwinConfig) -> Canvas:
    """Build and start a demo on an off-screen canvas, returning the first frame."""
    builder = get_demo(name)
    canvas = Canvas(config.width, config.height)
    app = WindowManager()
    window = builder(app, config.scheme(), config.props(), canvas)
    app.set_running(window)
    return canvas
