"""Note domain events."""

from nexus.domain.shared.events import DomainEvent


class NoteAdded(DomainEvent):
    """Event raised when a note is created."""

    note_id: str
    color: str


class NoteUpdated(DomainEvent):
    """Event raised when a note's title or content is rewritten."""

    note_id: str
    title: str


class NoteDeleted(DomainEvent):
    """Event raised when a note is removed."""

    note_id: str
