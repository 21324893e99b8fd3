"""Workspace-wide CLI commands.

The dashboard, the settings screen and the workspace reset. These are
registered directly on the root app rather than as a group.
"""

import typer
from rich.markup import escape
from rich.table import Table

from nexus.application import estimate_storage_usage, summarize_workspace
from nexus.domain.task import TaskStatus
from nexus.interfaces.cli.commands.note import display_title
from nexus.interfaces.cli.commands.task import COLUMN_TITLES, PRIORITY_STYLES
from nexus.interfaces.cli.common import (
    console,
    format_timestamp,
    get_state,
    get_store,
    print_header,
    print_success,
    short_id,
)

BAR_WIDTH = 30

STATUS_STYLES = {
    TaskStatus.TODO: "magenta",
    TaskStatus.IN_PROGRESS: "yellow",
    TaskStatus.DONE: "green",
}


def dashboard(ctx: typer.Context) -> None:
    """Show workspace statistics, pending tasks and recent notes."""
    snapshot = get_store(ctx).snapshot()
    summary = summarize_workspace(snapshot.tasks, snapshot.notes)

    print_header("DASHBOARD")
    typer.echo(
        f"Active tasks: {summary.active_tasks} "
        f"({summary.high_priority_active} high priority)"
    )
    typer.echo(f"Completed:    {summary.completed_tasks}")
    typer.echo(f"Total notes:  {summary.total_notes}")
    typer.echo(f"Progress:     {summary.progress_percent}%")

    typer.echo("\n## Task Status")
    peak = max(summary.status_counts.values(), default=0)
    for status in TaskStatus:
        count = summary.status_counts[status]
        bar = "█" * (round(count / peak * BAR_WIDTH) if peak else 0)
        style = STATUS_STYLES[status]
        console.print(f"{COLUMN_TITLES[status]:<12} [{style}]{bar}[/{style}] {count}")

    typer.echo("\n## Tasks to be Done")
    if summary.pending_by_priority:
        table = Table(show_header=False, box=None, padding=(0, 1))
        for task in summary.pending_by_priority:
            style = PRIORITY_STYLES[task.priority]
            table.add_row(
                short_id(task.id),
                escape(task.title),
                f"[{style}]{task.priority.value.upper()}[/{style}]",
            )
        console.print(table)
    else:
        typer.echo("All caught up!")

    typer.echo("\n## Recent Notes")
    if summary.recent_notes:
        for note in summary.recent_notes:
            console.print(
                f"[{note.color}]●[/] {escape(display_title(note))} "
                f"[dim]{format_timestamp(note.updated_at)}[/dim]"
            )
    else:
        typer.echo("No notes captured yet.")


def settings(ctx: typer.Context) -> None:
    """Show where the workspace is stored and roughly how big it is."""
    state = get_state(ctx)
    snapshot = state.store.snapshot()
    usage = estimate_storage_usage(snapshot.tasks, snapshot.notes)

    print_header("WORKSPACE SETTINGS")
    typer.echo("All data is stored locally and never leaves this device.\n")
    typer.echo(f"Data directory: {state.resolved_data_dir}")
    typer.echo(f"Tasks:          {len(snapshot.tasks)}")
    typer.echo(f"Notes:          {len(snapshot.notes)}")
    typer.echo(f"Storage used:   approx. {usage.kilobytes} KB ({usage.total_bytes:,} bytes)")


def reset(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Permanently delete all tasks and notes."""
    if not yes:
        typer.echo("Resetting the workspace will permanently delete all tasks and notes.")
        typer.confirm("Are you absolutely sure?", abort=True)

    get_store(ctx).reset_workspace()
    print_success("Workspace reset. All tasks and notes deleted.")
