"""Task domain events.

Immutable records of task changes, delivered to Store listeners.
"""

from nexus.domain.shared.events import DomainEvent
from nexus.domain.task.models import TaskPriority, TaskStatus


class TaskAdded(DomainEvent):
    """Event raised when a task is created."""

    task_id: str
    title: str
    priority: TaskPriority


class TaskStatusChanged(DomainEvent):
    """Event raised when a task moves to another board column."""

    task_id: str
    old_status: TaskStatus
    new_status: TaskStatus


class TaskDeleted(DomainEvent):
    """Event raised when a task is removed from the board."""

    task_id: str
