"""Interfaces layer for Nexus.

This layer is the view: it renders snapshots of the store and calls the
store's operations in response to user input. It never changes state
directly.

- CLI: Command-line interface using Typer, with Rich tables
"""

from nexus.interfaces.cli import app

__all__ = ["app"]
