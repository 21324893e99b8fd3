"""Task board CLI commands.

Commands for the task lifecycle: adding tasks, showing the board,
moving tasks between columns and deleting them.
"""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from nexus.domain.task import (
    Task,
    TaskPriority,
    TaskStatus,
    group_by_status,
    has_status,
)
from nexus.interfaces.cli.common import (
    console,
    format_timestamp,
    get_store,
    print_error,
    print_info,
    print_success,
    resolve_id,
    short_id,
)

app = typer.Typer(help="Task board commands")

COLUMN_TITLES = {
    TaskStatus.TODO: "TO DO",
    TaskStatus.IN_PROGRESS: "IN PROGRESS",
    TaskStatus.DONE: "DONE",
}

PRIORITY_STYLES = {
    TaskPriority.HIGH: "red",
    TaskPriority.MEDIUM: "yellow",
    TaskPriority.LOW: "blue",
}


# =============================================================================
# Output Formatting Helpers
# =============================================================================


def format_card(task: Task) -> str:
    """Format a task as a one-line board card (rich markup)."""
    style = PRIORITY_STYLES[task.priority]
    return (
        f"[dim]{short_id(task.id)}[/dim] {escape(task.title)} "
        f"[{style}]({task.priority.value})[/{style}]"
    )


def build_board(tasks: list[Task]) -> Table:
    """Lay the tasks out in three columns, one card per row."""
    columns = group_by_status(tasks)
    table = Table(show_lines=False, expand=True)
    for status in TaskStatus:
        table.add_column(f"{COLUMN_TITLES[status]} ({len(columns[status])})")

    depth = max((len(c) for c in columns.values()), default=0)
    for row in range(depth):
        cells = []
        for status in TaskStatus:
            column = columns[status]
            cells.append(format_card(column[row]) if row < len(column) else "")
        table.add_row(*cells)
    return table


def build_column(tasks: list[Task], status: TaskStatus) -> Table:
    """List a single column with full task details."""
    table = Table(title=COLUMN_TITLES[status], expand=True)
    table.add_column("ID", no_wrap=True)
    table.add_column("Title")
    table.add_column("Priority")
    table.add_column("Created", no_wrap=True)
    for task in filter(has_status(status), tasks):
        style = PRIORITY_STYLES[task.priority]
        table.add_row(
            short_id(task.id),
            escape(task.title),
            f"[{style}]{task.priority.value}[/{style}]",
            format_timestamp(task.created_at),
        )
    return table


def _resolve_task_id(ctx: typer.Context, given: str) -> str:
    store = get_store(ctx)
    return resolve_id([t.id for t in store.tasks], given, "task")


# =============================================================================
# Commands
# =============================================================================


@app.command("add")
def add(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="What needs to be done"),
    description: str = typer.Option("", "--description", "-d", help="Extra context"),
    priority: TaskPriority = typer.Option(
        TaskPriority.MEDIUM,
        "--priority",
        "-p",
        case_sensitive=False,
        help="Task priority",
    ),
) -> None:
    """Add a task to the TO DO column.

    Example:
        nexus task add "Buy milk" -p high
    """
    if not title.strip():
        print_error("Task title cannot be blank.")
        raise typer.Exit(1)

    task = get_store(ctx).add_task(title, description, priority)
    print_success(f"Added task {short_id(task.id)}: {task.title}")


@app.command("list")
def list_tasks(
    ctx: typer.Context,
    status: Optional[TaskStatus] = typer.Option(
        None,
        "--status",
        "-s",
        case_sensitive=False,
        help="Show only one column",
    ),
) -> None:
    """Show the task board."""
    tasks = list(get_store(ctx).tasks)
    if not tasks:
        print_info("No tasks yet. Add one with: nexus task add TITLE")
        return

    if status is None:
        console.print(build_board(tasks))
    else:
        console.print(build_column(tasks, status))


@app.command("show")
def show(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task id or unique prefix"),
) -> None:
    """Show every field of one task."""
    task = get_store(ctx).get_task(_resolve_task_id(ctx, task_id))
    if task is None:
        raise typer.Exit(1)

    typer.echo(f"ID:          {task.id}")
    typer.echo(f"Title:       {task.title}")
    typer.echo(f"Status:      {task.status.value}")
    typer.echo(f"Priority:    {task.priority.value}")
    typer.echo(f"Created:     {format_timestamp(task.created_at)}")
    if task.description:
        typer.echo("")
        typer.echo(task.description)


@app.command("move")
def move(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task id or unique prefix"),
    status: TaskStatus = typer.Argument(..., case_sensitive=False, help="New column"),
) -> None:
    """Move a task to another column.

    Example:
        nexus task move 3f1c done
    """
    full_id = _resolve_task_id(ctx, task_id)
    get_store(ctx).update_task_status(full_id, status)
    print_success(f"Moved task {short_id(full_id)} to {COLUMN_TITLES[status]}")


@app.command("delete")
def delete(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task id or unique prefix"),
) -> None:
    """Delete a task."""
    full_id = _resolve_task_id(ctx, task_id)
    get_store(ctx).delete_task(full_id)
    print_success(f"Deleted task {short_id(full_id)}")
