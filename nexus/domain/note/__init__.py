"""Note domain - free-form notes with a color tag."""

from .events import NoteAdded, NoteDeleted, NoteUpdated
from .models import DEFAULT_NOTE_TITLE, NOTE_COLORS, Note, choose_note_color, find_note

__all__ = [
    "Note",
    "NOTE_COLORS",
    "DEFAULT_NOTE_TITLE",
    "choose_note_color",
    "find_note",
    "NoteAdded",
    "NoteUpdated",
    "NoteDeleted",
]
