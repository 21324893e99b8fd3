# tests/test_store.py

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from nexus.application import WorkspaceStore, estimate_storage_usage
from nexus.domain.note import NOTE_COLORS
from nexus.domain.task import TaskPriority, TaskStatus
from nexus.infrastructure.storage import (
    FileKeyValueStorage,
    MemoryKeyValueStorage,
    PersistenceAdapter,
)

from .fakes import BrokenStorage, FailingStorage, FakeClock, RecordingListener, SequentialIds


def test_task_add_move_delete_scenario(store: WorkspaceStore, clock: FakeClock) -> None:
    task = store.add_task("Buy milk", "", TaskPriority.MEDIUM)

    assert len(store.tasks) == 1
    assert task.status == TaskStatus.TODO
    assert task.priority == TaskPriority.MEDIUM
    assert task.created_at == clock.now_ms

    store.update_task_status(task.id, TaskStatus.DONE)
    moved = store.get_task(task.id)
    assert moved is not None
    assert moved.status == TaskStatus.DONE
    assert moved.title == "Buy milk"
    assert moved.created_at == task.created_at
    assert moved.priority == task.priority

    store.delete_task(task.id)
    assert store.tasks == ()


def test_tasks_are_newest_first(store: WorkspaceStore) -> None:
    store.add_task("A", "", TaskPriority.LOW)
    store.add_task("B", "", TaskPriority.HIGH)

    assert [t.title for t in store.tasks] == ["B", "A"]


def test_store_does_not_validate_titles(store: WorkspaceStore) -> None:
    task = store.add_task("   ", "", TaskPriority.LOW)
    assert store.tasks[0].id == task.id


def test_note_add_and_update_scenario(store: WorkspaceStore) -> None:
    note = store.add_note()

    assert len(store.notes) == 1
    assert note.title == "New Note"
    assert note.content == ""
    assert note.color in NOTE_COLORS

    store.update_note(note.id, "Groceries", "milk, eggs")
    updated = store.get_note(note.id)
    assert updated is not None
    assert updated.title == "Groceries"
    assert updated.content == "milk, eggs"
    assert updated.color == note.color
    # same clock tick: still strictly later
    assert updated.updated_at > note.updated_at


def test_note_update_uses_clock_time(store: WorkspaceStore, clock: FakeClock) -> None:
    note = store.add_note()
    clock.advance(5_000)

    store.update_note(note.id, note.title, "later")

    updated = store.get_note(note.id)
    assert updated is not None
    assert updated.updated_at == clock.now_ms


def test_notes_are_newest_first(store: WorkspaceStore) -> None:
    first = store.add_note()
    second = store.add_note()

    assert [n.id for n in store.notes] == [second.id, first.id]


@pytest.mark.parametrize(
    "operation",
    [
        lambda s: s.update_task_status("missing", TaskStatus.DONE),
        lambda s: s.delete_task("missing"),
        lambda s: s.update_note("missing", "t", "c"),
        lambda s: s.delete_note("missing"),
    ],
)
def test_missing_id_is_a_silent_noop(store: WorkspaceStore, operation) -> None:
    store.add_task("A", "a", TaskPriority.LOW)
    store.add_task("B", "b", TaskPriority.HIGH)
    store.add_note()
    before = store.snapshot()
    listener = RecordingListener()
    store.subscribe(listener)

    operation(store)

    assert store.snapshot() == before
    assert listener.events == []


def test_reset_clears_everything(
    store: WorkspaceStore, storage: MemoryKeyValueStorage
) -> None:
    store.add_task("A", "", TaskPriority.LOW)
    store.add_note()
    assert storage.has_item("nexus_tasks")
    assert storage.has_item("nexus_notes")

    store.reset_workspace()

    assert store.tasks == ()
    assert store.notes == ()
    assert not storage.has_item("nexus_tasks")
    assert not storage.has_item("nexus_notes")


def test_reset_on_empty_workspace_is_harmless(store: WorkspaceStore) -> None:
    store.reset_workspace()
    store.reset_workspace()

    assert store.tasks == ()
    assert store.notes == ()


def test_ids_are_unique_across_many_adds() -> None:
    store = WorkspaceStore()
    store.load()

    for i in range(200):
        store.add_task(f"task {i}", "", TaskPriority.LOW)
        store.add_note()

    task_ids = [t.id for t in store.tasks]
    note_ids = [n.id for n in store.notes]
    assert len(set(task_ids)) == 200
    assert len(set(note_ids)) == 200


def test_every_mutation_is_saved(store: WorkspaceStore, storage: MemoryKeyValueStorage) -> None:
    task = store.add_task("Write report", "draft first", TaskPriority.HIGH)
    assert '"title":"Write report"' in storage.get_item("nexus_tasks")

    store.update_task_status(task.id, TaskStatus.IN_PROGRESS)
    assert '"status":"in-progress"' in storage.get_item("nexus_tasks")

    note = store.add_note()
    store.update_note(note.id, "Ideas", "")
    assert '"title":"Ideas"' in storage.get_item("nexus_notes")

    store.delete_task(task.id)
    assert storage.get_item("nexus_tasks") == "[]"


def test_load_restores_previous_session(ids: SequentialIds, clock: FakeClock) -> None:
    storage = MemoryKeyValueStorage()
    first = WorkspaceStore(PersistenceAdapter(storage), id_generator=ids, clock=clock)
    first.load()
    first.add_task("A", "", TaskPriority.LOW)
    first.add_task("B", "", TaskPriority.MEDIUM)
    note = first.add_note()
    first.update_note(note.id, "Kept", "body")

    second = WorkspaceStore(PersistenceAdapter(storage))
    second.load()

    assert second.tasks == first.tasks
    assert second.notes == first.notes


def test_mutations_before_load_are_not_saved(clock: FakeClock) -> None:
    storage = MemoryKeyValueStorage({"nexus_tasks": '[{"id":"old","title":"Old",'
                                     '"description":"","status":"todo",'
                                     '"priority":"low","createdAt":1}]'})
    store = WorkspaceStore(PersistenceAdapter(storage), clock=clock)

    store.add_task("Early", "", TaskPriority.LOW)
    assert '"Old"' in storage.get_item("nexus_tasks")

    store.load()
    assert [t.title for t in store.tasks] == ["Old"]


def test_second_load_is_ignored(store: WorkspaceStore) -> None:
    store.add_task("A", "", TaskPriority.LOW)

    store.load()

    assert [t.title for t in store.tasks] == ["A"]


def test_write_failure_keeps_memory_state(ids: SequentialIds, clock: FakeClock) -> None:
    failing = FailingStorage()
    store = WorkspaceStore(PersistenceAdapter(failing), id_generator=ids, clock=clock)
    store.load()

    task = store.add_task("Survives", "", TaskPriority.HIGH)
    store.update_task_status(task.id, TaskStatus.DONE)
    kept = store.get_task(task.id)
    assert kept is not None and kept.status == TaskStatus.DONE

    note = store.add_note()
    store.reset_workspace()
    store.add_note()

    assert failing.write_attempts == 4
    assert store.tasks == ()
    assert len(store.notes) == 1
    assert store.notes[0].id != note.id


def test_quota_exceeded_does_not_raise(ids: SequentialIds, clock: FakeClock) -> None:
    storage = MemoryKeyValueStorage(quota_bytes=200)
    store = WorkspaceStore(PersistenceAdapter(storage), id_generator=ids, clock=clock)
    store.load()

    for i in range(10):
        store.add_task(f"task number {i}", "x" * 20, TaskPriority.LOW)

    assert len(store.tasks) == 10
    assert len(storage.get_item("nexus_tasks") or "") <= 200


def test_session_only_store_works_without_persistence() -> None:
    store = WorkspaceStore()
    store.load()

    task = store.add_task("In memory", "", TaskPriority.LOW)
    store.reset_workspace()

    assert store.get_task(task.id) is None


def test_listeners_receive_one_event_per_change(store: WorkspaceStore) -> None:
    listener = RecordingListener()
    store.subscribe(listener)

    task = store.add_task("A", "", TaskPriority.LOW)
    store.update_task_status(task.id, TaskStatus.IN_PROGRESS)
    store.delete_task(task.id)
    note = store.add_note()
    store.update_note(note.id, "t", "c")
    store.delete_note(note.id)
    store.reset_workspace()

    assert listener.kinds == [
        "TaskAdded",
        "TaskStatusChanged",
        "TaskDeleted",
        "NoteAdded",
        "NoteUpdated",
        "NoteDeleted",
        "WorkspaceReset",
    ]
    status_event = listener.events[1]
    assert status_event.old_status == TaskStatus.TODO
    assert status_event.new_status == TaskStatus.IN_PROGRESS


def test_unsubscribe_and_failing_listener(store: WorkspaceStore) -> None:
    listener = RecordingListener()
    unsubscribe = store.subscribe(listener)

    def broken(event) -> None:
        raise RuntimeError("view crashed")

    store.subscribe(broken)
    store.add_task("A", "", TaskPriority.LOW)
    unsubscribe()
    store.add_task("B", "", TaskPriority.LOW)

    assert listener.kinds == ["TaskAdded"]
    assert len(store.tasks) == 2


def test_snapshots_are_read_only(store: WorkspaceStore) -> None:
    store.add_task("A", "", TaskPriority.LOW)
    snapshot = store.snapshot()

    with pytest.raises(ValidationError):
        snapshot.tasks[0].title = "changed"  # type: ignore[misc]

    store.add_task("B", "", TaskPriority.LOW)
    assert len(snapshot.tasks) == 1


def test_unencodable_text_is_kept_in_memory(
    tmp_path: Path, ids: SequentialIds, clock: FakeClock
) -> None:
    store = WorkspaceStore(
        PersistenceAdapter(FileKeyValueStorage(tmp_path)), id_generator=ids, clock=clock
    )
    store.load()
    listener = RecordingListener()
    store.subscribe(listener)

    task = store.add_task("bad \udcff", "", TaskPriority.LOW)
    note = store.add_note()
    store.update_note(note.id, "also \udcff", "")

    assert store.tasks[0].id == task.id
    assert store.notes[0].title == "also \udcff"
    assert listener.kinds == ["TaskAdded", "NoteAdded", "NoteUpdated"]
    assert not (tmp_path / "nexus_tasks.json").exists()
    assert not (tmp_path / "nexus_tasks.json.tmp").exists()
    assert estimate_storage_usage(store.tasks, store.notes).total_bytes > 0


def test_unexpected_write_error_keeps_memory_state(ids: SequentialIds, clock: FakeClock) -> None:
    broken = BrokenStorage()
    store = WorkspaceStore(PersistenceAdapter(broken), id_generator=ids, clock=clock)
    store.load()
    listener = RecordingListener()
    store.subscribe(listener)

    task = store.add_task("Survives", "", TaskPriority.HIGH)
    store.update_task_status(task.id, TaskStatus.DONE)
    store.add_note()
    store.reset_workspace()

    assert broken.write_attempts == 3
    assert listener.kinds == ["TaskAdded", "TaskStatusChanged", "NoteAdded", "WorkspaceReset"]
    assert store.tasks == ()
