"""CLI interface for Nexus using Typer.

This module provides the command-line front end for Nexus, a local task
board and notes workspace.

Usage:
    nexus task add "Buy milk"     # Add a task
    nexus task list               # Show the board
    nexus note add                # Capture a note
    nexus dashboard               # Workspace at a glance

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (task, note, workspace)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from nexus import __version__
from nexus.config import get_config
from nexus.interfaces.cli.commands import note, task, workspace
from nexus.interfaces.cli.common import CliState, print_warning
from nexus.logging_setup import parse_level, setup_logging

# Create the main Typer application
app = typer.Typer(
    name="nexus",
    help="Local task board and notes workspace",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"nexus version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        help="Workspace directory (or set NEXUS_DATA_DIR env var)",
        envvar="NEXUS_DATA_DIR",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
) -> None:
    """Nexus - tasks and notes that never leave your machine.

    Everything is kept in a local data directory and saved after
    every change.
    """
    config = get_config()

    level: int = logging.DEBUG
    if not verbose:
        try:
            level = parse_level(config.log_level)
        except ValueError:
            print_warning(f"Unknown log level {config.log_level!r} in config; using WARNING")
            level = logging.WARNING
    setup_logging(level, config.log_file)

    if isinstance(ctx.obj, CliState):
        # Pre-built state (tests, embedding) keeps its store.
        if data_dir is not None:
            ctx.obj.data_dir = data_dir
        return
    ctx.obj = CliState(config=config, data_dir=data_dir)


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(task.app, name="task")
app.add_typer(note.app, name="note")

app.command("dashboard")(workspace.dashboard)
app.command("settings")(workspace.settings)
app.command("reset")(workspace.reset)


__all__ = ["app"]
