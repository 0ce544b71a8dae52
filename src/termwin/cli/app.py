"""Typer CLI application: run, snapshot and inspect demos and themes."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.color import Color as RichColor
from rich.console import Console
from rich.markup import escape
from rich.style import Style
from rich.table import Table
from rich.text import Text as RichText

from termwin.config import TermwinConfig, load_config
from termwin.core.canvas import Canvas
from termwin.core.color import Color, ColorMode
from termwin.core.theme import THEMES, ColorScheme


def _rich_color(color: Color) -> RichColor:
    if color.mode == ColorMode.TRUE_COLOR:
        assert isinstance(color.value, tuple)
        return RichColor.from_rgb(*color.value)
    assert isinstance(color.value, int)
    return RichColor.from_ansi(color.value)


def canvas_to_rich(canvas: Canvas) -> RichText:
    """Convert a rendered canvas into styled rich text."""
    text = RichText()
    for y, row in enumerate(canvas.rows()):
        if y:
            text.append("\n")
        for cell in row:
            text.append(cell.char, Style(color=_rich_color(cell.fg), bgcolor=_rich_color(cell.bg)))
    return text


def _swatch(color: Color) -> RichText:
    return RichText(f" {color.name} ", style=Style(bgcolor=_rich_color(color)))


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termwin",
        help="Keyboard-driven terminal windows: run and inspect the bundled demos.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def _load(config_file: Optional[Path], theme: Optional[str]) -> TermwinConfig:
        try:
            config = load_config(config_file)
            if theme:
                config.theme = theme
                config.validate()
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)
        return config

    @app.command()
    def demos() -> None:
        """List the bundled demos."""
        from termwin.cli.demos import DEMOS, describe

        for name, builder in DEMOS.items():
            console.print(f"[bold cyan]{name:<12}[/] {describe(builder)}")

    @app.command()
    def themes() -> None:
        """Show every built-in theme's color roles."""
        table = Table(title="Themes")
        table.add_column("Role", style="bold")
        for name in THEMES:
            table.add_column(name)
        for role in ColorScheme.roles():
            table.add_row(role, *(_swatch(getattr(scheme, role)) for scheme in THEMES.values()))
        console.print(table)

    @app.command()
    def run(
        name: Annotated[str, typer.Argument(help="Demo to run (see 'termwin demos')")],
        theme: Annotated[Optional[str], typer.Option("--theme", "-t", help="Theme name")] = None,
        config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="JSON config file")] = None,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write logs to this file")] = None,
    ) -> None:
        """Run a demo full-screen. Press Esc to leave."""
        from termwin.cli.demos import DEMOS
        from termwin.cli.runner import run_demo

        if name.lower() not in DEMOS:
            console.print(f"[red]No such demo: {escape(name)}[/]")
            raise typer.Exit(1)
        config = _load(config_file, theme)
        if log_file is not None:
            config.log_file = str(log_file)
        run_demo(name, config)

    @app.command()
    def snapshot(
        name: Annotated[str, typer.Argument(help="Demo to render")],
        theme: Annotated[Optional[str], typer.Option("--theme", "-t", help="Theme name")] = None,
        config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="JSON config file")] = None,
        plain: Annotated[bool, typer.Option("--plain", "-p", help="Print characters only")] = False,
    ) -> None:
        """Render a demo's first screen off-screen and print it."""
        from termwin.cli.demos import DEMOS
        from termwin.cli.runner import snapshot_demo

        if name.lower() not in DEMOS:
            console.print(f"[red]No such demo: {escape(name)}[/]")
            raise typer.Exit(1)
        config = _load(config_file, theme)
        canvas = snapshot_demo(name, config)
        if plain:
            print(canvas.to_text())
        else:
            console.print(canvas_to_rich(canvas))

    return app
