"""Note CLI commands."""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from nexus.domain.note import Note
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

app = typer.Typer(help="Note commands")

PREVIEW_LENGTH = 40


def display_title(note: Note) -> str:
    """Title for display; blank titles show as 'Untitled'."""
    return note.title or "Untitled"


def preview(content: str, length: int = PREVIEW_LENGTH) -> str:
    """First line of the content, shortened to length characters."""
    first_line = content.strip().splitlines()[0] if content.strip() else ""
    if len(first_line) > length:
        return first_line[: length - 3] + "..."
    return first_line


def _resolve_note_id(ctx: typer.Context, given: str) -> str:
    store = get_store(ctx)
    return resolve_id([n.id for n in store.notes], given, "note")


@app.command("add")
def add(
    ctx: typer.Context,
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Note title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="Note body"),
) -> None:
    """Create a note.

    Without options the note is titled "New Note" and left empty.
    """
    store = get_store(ctx)
    note = store.add_note()
    if title is not None or content is not None:
        store.update_note(
            note.id,
            note.title if title is None else title,
            note.content if content is None else content,
        )
        note = store.get_note(note.id) or note
    print_success(f"Added note {short_id(note.id)}: {display_title(note)}")


@app.command("list")
def list_notes(ctx: typer.Context) -> None:
    """List notes, most recently created first."""
    notes = get_store(ctx).notes
    if not notes:
        print_info("Workspace empty. Capture a note with: nexus note add")
        return

    table = Table(expand=True)
    table.add_column("", no_wrap=True, width=1)
    table.add_column("ID", no_wrap=True)
    table.add_column("Title")
    table.add_column("Preview")
    table.add_column("Updated", no_wrap=True)
    for note in notes:
        table.add_row(
            f"[{note.color}]●[/]",
            short_id(note.id),
            escape(display_title(note)),
            escape(preview(note.content)),
            format_timestamp(note.updated_at),
        )
    console.print(table)


@app.command("show")
def show(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., help="Note id or unique prefix"),
) -> None:
    """Print a note in full."""
    note = get_store(ctx).get_note(_resolve_note_id(ctx, note_id))
    if note is None:
        raise typer.Exit(1)

    typer.echo(f"# {display_title(note)}")
    typer.echo(f"ID: {note.id}  Color: {note.color}  Updated: {format_timestamp(note.updated_at)}")
    if note.content:
        typer.echo("")
        typer.echo(note.content)


@app.command("edit")
def edit(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., help="Note id or unique prefix"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New body"),
) -> None:
    """Rewrite a note's title and/or content.

    Whatever is not given keeps its current value.

    Example:
        nexus note edit 9b2e --title Groceries --content "milk, eggs"
    """
    if title is None and content is None:
        print_error("Nothing to change; pass --title and/or --content.")
        raise typer.Exit(1)

    store = get_store(ctx)
    note = store.get_note(_resolve_note_id(ctx, note_id))
    if note is None:
        raise typer.Exit(1)

    store.update_note(
        note.id,
        note.title if title is None else title,
        note.content if content is None else content,
    )
    print_success(f"Updated note {short_id(note.id)}")


@app.command("delete")
def delete(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., help="Note id or unique prefix"),
) -> None:
    """Delete a note."""
    full_id = _resolve_note_id(ctx, note_id)
    get_store(ctx).delete_note(full_id)
    print_success(f"Deleted note {short_id(full_id)}")
