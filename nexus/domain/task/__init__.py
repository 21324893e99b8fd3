"""Task domain - the task board.

All exports are pure (no I/O, no side effects).

Key Types:
    TaskStatus - Board column (todo, in-progress, done)
    TaskPriority - Priority chosen at creation
    Task - A single task record

Board Queries:
    find_task - Look up a task by id
    group_by_status - Split tasks into board columns
    count_by_status - Count tasks per column
    pending_by_priority - Active tasks, most urgent first
    count_high_priority_active - Active high priority count

Domain Events:
    TaskAdded - New task created
    TaskStatusChanged - Task moved between columns
    TaskDeleted - Task removed
"""

from .board import (
    count_by_status,
    count_high_priority_active,
    find_task,
    group_by_status,
    has_status,
    is_active,
    pending_by_priority,
)
from .events import TaskAdded, TaskDeleted, TaskStatusChanged
from .models import Task, TaskPriority, TaskStatus

__all__ = [
    # Models
    "TaskStatus",
    "TaskPriority",
    "Task",
    # Board queries
    "is_active",
    "has_status",
    "find_task",
    "group_by_status",
    "count_by_status",
    "pending_by_priority",
    "count_high_priority_active",
    # Events
    "TaskAdded",
    "TaskStatusChanged",
    "TaskDeleted",
]
