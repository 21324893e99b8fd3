"""Pure board queries over a task collection.

All functions in this module are pure - no I/O, no side effects.
They take a sequence of tasks in collection order (newest first) and
never reorder it unless the function says so.
"""

from collections.abc import Callable, Sequence

from .models import Task, TaskPriority, TaskStatus


# =============================================================================
# Predicates
# =============================================================================


def is_active(task: Task) -> bool:
    """Check if a task still needs work (anything but done)."""
    return task.status != TaskStatus.DONE


def has_status(status: TaskStatus) -> Callable[[Task], bool]:
    """Create a predicate that matches tasks with the given status."""

    def predicate(task: Task) -> bool:
        return task.status == status

    return predicate


# =============================================================================
# Queries
# =============================================================================


def find_task(tasks: Sequence[Task], task_id: str) -> Task | None:
    """Find a task by id.

    Returns:
        The task, or None if no task has that id
    """
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def group_by_status(tasks: Sequence[Task]) -> dict[TaskStatus, list[Task]]:
    """Split tasks into the three board columns.

    Every status is present in the result, even when its column is
    empty. Each column keeps collection order.

    Returns:
        Dict mapping status to the tasks in that column
    """
    columns: dict[TaskStatus, list[Task]] = {status: [] for status in TaskStatus}
    for task in tasks:
        columns[task.status].append(task)
    return columns


def count_by_status(tasks: Sequence[Task]) -> dict[TaskStatus, int]:
    """Count tasks by status.

    Returns:
        Dict mapping every status to its count
    """
    return {status: len(column) for status, column in group_by_status(tasks).items()}


def pending_by_priority(tasks: Sequence[Task]) -> list[Task]:
    """Active tasks ordered high -> medium -> low.

    The sort is stable, so tasks of equal priority keep collection order.
    """
    return sorted((t for t in tasks if is_active(t)), key=lambda t: t.priority.rank)


def count_high_priority_active(tasks: Sequence[Task]) -> int:
    """Count active tasks with high priority."""
    return sum(1 for t in tasks if is_active(t) and t.priority == TaskPriority.HIGH)
