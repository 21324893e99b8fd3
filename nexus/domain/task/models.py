"""Task domain models.

Pure domain models for the task board. Uses Pydantic so the persisted
record and the in-memory record are the same structure.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    """Board column a task sits in."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class TaskPriority(str, Enum):
    """Priority chosen when the task is created."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Sort rank, most urgent first (high=0, medium=1, low=2)."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    TaskPriority.HIGH: 0,
    TaskPriority.MEDIUM: 1,
    TaskPriority.LOW: 2,
}


class Task(BaseModel):
    """A single task on the board.

    Tasks are immutable; the Store replaces a task with an updated copy
    when its status changes. Priority is fixed at creation.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    created_at: int = Field(alias="createdAt")
