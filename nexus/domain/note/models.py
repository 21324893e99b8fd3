"""Note domain models."""

import random
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_NOTE_TITLE = "New Note"
HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"

# Blue, emerald, red, amber, violet, pink
NOTE_COLORS: tuple[str, ...] = (
    "#3b82f6",
    "#10b981",
    "#ef4444",
    "#f59e0b",
    "#8b5cf6",
    "#ec4899",
)


class Note(BaseModel):
    """A free-form note.

    The color tag is picked once at creation and never changes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    content: str
    updated_at: int = Field(alias="updatedAt")
    color: str = Field(pattern=HEX_COLOR_PATTERN)


def choose_note_color(rng: random.Random | None = None) -> str:
    """Pick a palette color uniformly at random."""
    return (rng or random).choice(NOTE_COLORS)


def find_note(notes: Sequence[Note], note_id: str) -> Note | None:
    """Find a note by id, or None if absent."""
    for note in notes:
        if note.id == note_id:
            return note
    return None
