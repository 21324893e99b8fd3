"""Shared utilities for Nexus CLI commands.

This module provides common utilities used across CLI commands:
- CliState, the per-invocation holder of config and the store
- Formatted output helpers (error, success, info, warning)
- Id prefix resolution so users can type the first few characters
- Timestamp and id formatting for display
"""

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console

from nexus.application import WorkspaceStore, open_workspace
from nexus.config import NexusConfig

SHORT_ID_LENGTH = 8

console = Console(highlight=False)


class CliState:
    """Objects shared by the commands of one CLI invocation.

    The store is opened on first use so `--help` never touches storage.
    Passing a store in (as tests do) skips opening one from disk.
    """

    def __init__(
        self,
        config: NexusConfig | None = None,
        data_dir: Path | None = None,
        store: WorkspaceStore | None = None,
    ) -> None:
        self.config = config or NexusConfig()
        self.data_dir = data_dir
        self._store = store

    @property
    def resolved_data_dir(self) -> Path:
        return Path(self.data_dir or self.config.data_dir).expanduser()

    @property
    def store(self) -> WorkspaceStore:
        if self._store is None:
            self._store = open_workspace(self.config, self.resolved_data_dir)
        return self._store


def get_state(ctx: typer.Context) -> CliState:
    """Return the CliState attached to the root context."""
    state = ctx.find_root().obj
    if not isinstance(state, CliState):
        state = CliState()
        ctx.find_root().obj = state
    return state


def get_store(ctx: typer.Context) -> WorkspaceStore:
    """Return the loaded store for this invocation."""
    return get_state(ctx).store


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message.

    Args:
        msg: Info message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    """Print a formatted warning message.

    Args:
        msg: Warning message to display
    """
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


def print_header(title: str, width: int = 60) -> None:
    """Print a title between two separator lines."""
    typer.echo("=" * width)
    typer.echo(title)
    typer.echo("=" * width)


def short_id(full_id: str) -> str:
    """Shorten an id for display."""
    return full_id[:SHORT_ID_LENGTH]


def format_timestamp(epoch_ms: int) -> str:
    """Format epoch milliseconds as local date and time."""
    return datetime.fromtimestamp(epoch_ms / 1000).strftime("%Y-%m-%d %H:%M")


def resolve_id(candidates: Sequence[str], given: str, kind: str) -> str:
    """Resolve a full id from an id or a unique prefix of one.

    Args:
        candidates: All ids currently in the collection.
        given: What the user typed.
        kind: "task" or "note", used in error messages.

    Returns:
        The matching full id.

    Raises:
        typer.Exit: If nothing matches or the prefix is ambiguous.
    """
    given = given.strip()
    if not given:
        print_error(f"No {kind} id given.")
        raise typer.Exit(1)

    if given in candidates:
        return given

    matches = [c for c in candidates if c.startswith(given)]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        print_error(f"No {kind} matches id '{given}'.")
    else:
        print_error(f"Id '{given}' is ambiguous: {len(matches)} {kind}s match.")
    raise typer.Exit(1)
