"""Base domain event infrastructure.

Domain events are immutable records of a state change in the workspace.
The Store hands them to its listeners after every mutation so a view can
re-render without polling.

Example usage:
    >>> from nexus.domain.task.events import TaskDeleted
    >>> event = TaskDeleted(task_id="3f1c")
    >>> print(f"Event {event.event_id} occurred at {event.timestamp}")
"""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field


class DomainEvent(BaseModel):
    """Base class for all domain events.

    Each event has a unique ID and a UTC timestamp.
    """

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {"frozen": True}


class WorkspaceReset(DomainEvent):
    """Event raised when every task and note has been erased."""

    tasks_removed: int
    notes_removed: int
