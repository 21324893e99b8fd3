"""Workspace application service.

Read-only summaries computed from a snapshot for the dashboard and the
settings screen. All functions are pure - no I/O, no side effects.
"""

from collections.abc import Sequence

from pydantic import BaseModel

from nexus.domain.note import Note
from nexus.domain.task import (
    Task,
    TaskStatus,
    count_by_status,
    count_high_priority_active,
    pending_by_priority,
)
from nexus.infrastructure.storage import encode_notes, encode_tasks, utf8_size

RECENT_NOTES_LIMIT = 4


class StorageUsage(BaseModel):
    """Approximate size of the persisted workspace.

    Informational only; the real medium may use more or less space.
    """

    tasks_bytes: int
    notes_bytes: int

    @property
    def total_bytes(self) -> int:
        return self.tasks_bytes + self.notes_bytes

    @property
    def kilobytes(self) -> int:
        """Total size rounded to whole kilobytes."""
        return round(self.total_bytes / 1024)


class WorkspaceSummary(BaseModel):
    """Dashboard figures for the workspace.

    Provides the stat cards, the status breakdown and the two short lists
    ("tasks to be done" and "recent notes") shown on the dashboard.
    """

    active_tasks: int
    completed_tasks: int
    high_priority_active: int
    total_notes: int
    status_counts: dict[TaskStatus, int]
    pending_by_priority: list[Task]
    recent_notes: list[Note]

    @property
    def total_tasks(self) -> int:
        return self.active_tasks + self.completed_tasks

    @property
    def progress_percent(self) -> float:
        """Calculate completion percentage."""
        if self.total_tasks == 0:
            return 0.0
        return round(self.completed_tasks / self.total_tasks * 100, 1)


def estimate_storage_usage(tasks: Sequence[Task], notes: Sequence[Note]) -> StorageUsage:
    """Estimate how much space the serialized collections take.

    Args:
        tasks: Task collection.
        notes: Note collection.

    Returns:
        StorageUsage with the UTF-8 size of each serialized collection.
    """
    return StorageUsage(
        tasks_bytes=utf8_size(encode_tasks(tasks)),
        notes_bytes=utf8_size(encode_notes(notes)),
    )


def estimate_storage_bytes(tasks: Sequence[Task], notes: Sequence[Note]) -> int:
    """Approximate serialized size of both collections in bytes."""
    return estimate_storage_usage(tasks, notes).total_bytes


def summarize_workspace(tasks: Sequence[Task], notes: Sequence[Note]) -> WorkspaceSummary:
    """Calculate dashboard figures for a workspace.

    Args:
        tasks: Task collection, newest first.
        notes: Note collection, newest first.

    Returns:
        WorkspaceSummary for display.
    """
    counts = count_by_status(tasks)
    completed = counts[TaskStatus.DONE]

    return WorkspaceSummary(
        active_tasks=len(tasks) - completed,
        completed_tasks=completed,
        high_priority_active=count_high_priority_active(tasks),
        total_notes=len(notes),
        status_counts=counts,
        pending_by_priority=pending_by_priority(tasks),
        recent_notes=list(notes[:RECENT_NOTES_LIMIT]),
    )
