"""Workspace store - the single owner of tasks and notes.

The store keeps both collections in memory (newest first), applies every
mutation, mirrors the changed collection through the persistence adapter
and then notifies listeners with a domain event.

Mutations are synchronous and total: an unknown id is a silent no-op and
a storage failure is logged without touching in-memory state.
"""

import logging
import random
import time
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from nexus.application.identifiers import IdGenerator
from nexus.domain.note import (
    DEFAULT_NOTE_TITLE,
    Note,
    NoteAdded,
    NoteDeleted,
    NoteUpdated,
    choose_note_color,
    find_note,
)
from nexus.domain.shared import DomainEvent, WorkspaceReset, is_err
from nexus.domain.task import (
    Task,
    TaskAdded,
    TaskDeleted,
    TaskPriority,
    TaskStatus,
    TaskStatusChanged,
    find_task,
)
from nexus.infrastructure.storage import PersistenceAdapter

logger = logging.getLogger(__name__)

Clock = Callable[[], int]
Listener = Callable[[DomainEvent], None]


def epoch_millis() -> int:
    """Current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


class WorkspaceSnapshot(BaseModel):
    """Read-only view of both collections at one point in time."""

    model_config = ConfigDict(frozen=True)

    tasks: tuple[Task, ...]
    notes: tuple[Note, ...]


class WorkspaceStore:
    """State container for the workspace.

    Views read snapshots and call the mutation methods; they never hold
    a mutable reference to the collections.

    Example:
        store = WorkspaceStore(PersistenceAdapter(MemoryKeyValueStorage()))
        store.load()
        task = store.add_task("Buy milk", "", TaskPriority.MEDIUM)
        store.update_task_status(task.id, TaskStatus.DONE)
    """

    def __init__(
        self,
        persistence: PersistenceAdapter | None = None,
        *,
        id_generator: Callable[[], str] | None = None,
        clock: Clock = epoch_millis,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            persistence: Adapter to mirror changes to. None keeps the
                workspace in memory only.
            id_generator: Source of new ids. Defaults to IdGenerator().
            clock: Returns the current time in epoch milliseconds.
            rng: Random instance used to pick note colors.
        """
        self._persistence = persistence
        self._new_id = id_generator or IdGenerator()
        self._clock = clock
        self._rng = rng
        self._tasks: list[Task] = []
        self._notes: list[Note] = []
        self._listeners: list[Listener] = []
        self._loaded = False

    # ---- read side ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Current tasks, newest first."""
        return tuple(self._tasks)

    @property
    def notes(self) -> tuple[Note, ...]:
        """Current notes, newest first."""
        return tuple(self._notes)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def snapshot(self) -> WorkspaceSnapshot:
        """Return both collections as one immutable snapshot."""
        return WorkspaceSnapshot(tasks=tuple(self._tasks), notes=tuple(self._notes))

    def get_task(self, task_id: str) -> Task | None:
        return find_task(self._tasks, task_id)

    def get_note(self, note_id: str) -> Note | None:
        return find_note(self._notes, note_id)

    # ---- lifecycle ----

    def load(self) -> None:
        """Replace the collections with the persisted workspace.

        Runs once. Later calls are ignored so a reload can never
        discard changes made since start-up.
        """
        if self._loaded:
            logger.warning("Workspace already loaded; ignoring repeated load")
            return
        try:
            if self._persistence is not None:
                workspace = self._persistence.load()
                self._tasks = list(workspace.tasks)
                self._notes = list(workspace.notes)
        finally:
            self._loaded = True

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for domain events.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- tasks ----

    def add_task(self, title: str, description: str, priority: TaskPriority) -> Task:
        """Create a task in the todo column and put it first.

        The title is taken as given; rejecting blank titles is the
        caller's job.
        """
        task = Task(
            id=self._new_id(),
            title=title,
            description=description,
            status=TaskStatus.TODO,
            priority=priority,
            created_at=self._clock(),
        )
        self._tasks.insert(0, task)
        logger.debug("Task added id=%s priority=%s", task.id, priority.value)
        self._save_tasks()
        self._emit(TaskAdded(task_id=task.id, title=task.title, priority=priority))
        return task

    def update_task_status(self, task_id: str, status: TaskStatus) -> None:
        """Move a task to another column. Unknown ids are ignored."""
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                self._tasks[index] = task.model_copy(update={"status": status})
                break
        else:
            logger.debug("update_task_status: no task id=%s", task_id)
            return

        self._save_tasks()
        self._emit(
            TaskStatusChanged(task_id=task_id, old_status=task.status, new_status=status)
        )

    def delete_task(self, task_id: str) -> None:
        """Remove a task. Unknown ids are ignored."""
        remaining = [t for t in self._tasks if t.id != task_id]
        if len(remaining) == len(self._tasks):
            logger.debug("delete_task: no task id=%s", task_id)
            return
        self._tasks = remaining
        self._save_tasks()
        self._emit(TaskDeleted(task_id=task_id))

    # ---- notes ----

    def add_note(self) -> Note:
        """Create an empty note with a random color and put it first."""
        note = Note(
            id=self._new_id(),
            title=DEFAULT_NOTE_TITLE,
            content="",
            updated_at=self._clock(),
            color=choose_note_color(self._rng),
        )
        self._notes.insert(0, note)
        logger.debug("Note added id=%s color=%s", note.id, note.color)
        self._save_notes()
        self._emit(NoteAdded(note_id=note.id, color=note.color))
        return note

    def update_note(self, note_id: str, title: str, content: str) -> None:
        """Rewrite a note's title and content. Unknown ids are ignored."""
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                # updatedAt must move forward even within one clock tick
                updated_at = max(self._clock(), note.updated_at + 1)
                self._notes[index] = note.model_copy(
                    update={"title": title, "content": content, "updated_at": updated_at}
                )
                break
        else:
            logger.debug("update_note: no note id=%s", note_id)
            return

        self._save_notes()
        self._emit(NoteUpdated(note_id=note_id, title=title))

    def delete_note(self, note_id: str) -> None:
        """Remove a note. Unknown ids are ignored."""
        remaining = [n for n in self._notes if n.id != note_id]
        if len(remaining) == len(self._notes):
            logger.debug("delete_note: no note id=%s", note_id)
            return
        self._notes = remaining
        self._save_notes()
        self._emit(NoteDeleted(note_id=note_id))

    # ---- workspace ----

    def reset_workspace(self) -> None:
        """Erase every task and note, in memory and in storage.

        Unconditional. Asking the user to confirm is up to the view.
        """
        tasks_removed, notes_removed = len(self._tasks), len(self._notes)
        self._tasks = []
        self._notes = []
        if self._persistence is not None:
            result = self._persistence.clear()
            if is_err(result):
                logger.warning("Stored workspace not fully cleared: %s", result.error)
        logger.info(
            "Workspace reset tasks_removed=%d notes_removed=%d", tasks_removed, notes_removed
        )
        self._emit(WorkspaceReset(tasks_removed=tasks_removed, notes_removed=notes_removed))

    # ---- helpers ----

    def _save_tasks(self) -> None:
        if self._persistence is None:
            return
        result = self._persistence.save_tasks(self._tasks)
        if is_err(result):
            logger.warning("Tasks kept in memory only: %s", result.error)

    def _save_notes(self) -> None:
        if self._persistence is None:
            return
        result = self._persistence.save_notes(self._notes)
        if is_err(result):
            logger.warning("Notes kept in memory only: %s", result.error)

    def _emit(self, event: DomainEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener failed on %s", type(event).__name__)
