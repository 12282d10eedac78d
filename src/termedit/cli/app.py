"""Typer CLI application."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from termedit import __version__
from termedit.config import Settings
from termedit.errors import TerminalError
from termedit.log import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termedit",
        help="A modal text editor for the terminal.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.command()
    def edit(
        path: Annotated[Optional[Path], typer.Argument(help="File to edit (created on first save)")] = None,
        log_level: Annotated[Optional[str], typer.Option("--log-level", "-l", help="Override the configured log level")] = None,
        version: Annotated[bool, typer.Option("--version", help="Show version and exit")] = False,
    ) -> None:
        """Edit a text file."""
        if version:
            console.print(f"termedit {__version__}")
            raise typer.Exit()

        settings = Settings.load()
        if log_level:
            settings.log_level = log_level.upper()
        setup_logging(settings)

        if not (sys.stdin.isatty() and sys.stdout.isatty()):
            err_console.print("[red]termedit must be run in an interactive terminal[/]")
            raise typer.Exit(1)
        if path is not None and path.is_dir():
            err_console.print(f"[red]{path} is a directory[/]")
            raise typer.Exit(1)

        from termedit.cli.editor.app import EditorApp

        try:
            editor = EditorApp.open(path, settings=settings)
        except OSError as e:
            logger.error("Cannot open %s: %s", path, e)
            err_console.print(f"[red]Cannot open {path}: {e.strerror or e}[/]")
            raise typer.Exit(1)

        try:
            editor.run()
        except TerminalError as e:
            # The terminal has been restored by the time we get here
            logger.exception("Fatal terminal error")
            err_console.print(f"[red]Terminal error:[/] {e}")
            raise typer.Exit(1)

    return app
