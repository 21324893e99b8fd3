"""CLI command groups for Nexus.

Command groups:
- task: Task board (add, list, show, move, delete)
- note: Notes (add, list, show, edit, delete)
- workspace: dashboard, settings and reset, registered on the root app

Each group is a Typer app that gets registered with the main app using
app.add_typer().
"""

from nexus.interfaces.cli.commands import note, task, workspace

__all__ = ["task", "note", "workspace"]
