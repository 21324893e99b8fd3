"""Persistence adapter for the workspace collections.

Mirrors the task and note collections to a key-value storage medium
under two fixed keys, returning Result types instead of raising.

Ordering rule: nothing is saved until load() has run. Saving an empty
collection during start-up would otherwise overwrite data that has not
been read yet.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from nexus.domain.note import Note
from nexus.domain.shared import Err, Ok, Result
from nexus.domain.task import Task
from nexus.infrastructure.storage.codec import (
    NOTES_KEY,
    TASKS_KEY,
    DecodedCollection,
    decode_notes,
    decode_tasks,
    encode_notes,
    encode_tasks,
)
from nexus.infrastructure.storage.key_value import KeyValueStorage, StorageError

logger = logging.getLogger(__name__)


@dataclass
class LoadedWorkspace:
    """Collections recovered by a load, newest first."""

    tasks: list[Task] = field(default_factory=list)
    notes: list[Note] = field(default_factory=list)


class PersistenceAdapter:
    """Reads and writes the workspace collections.

    Example:
        adapter = PersistenceAdapter(FileKeyValueStorage(data_dir))
        workspace = adapter.load()
        adapter.save_tasks(workspace.tasks)
    """

    def __init__(self, storage: KeyValueStorage) -> None:
        """Initialize the adapter.

        Args:
            storage: Medium to read from and write to.
        """
        self._storage = storage
        self._loaded = False

    @property
    def storage(self) -> KeyValueStorage:
        """The underlying storage medium."""
        return self._storage

    @property
    def loaded(self) -> bool:
        """True once load() has finished, successfully or not."""
        return self._loaded

    def load(self) -> LoadedWorkspace:
        """Read both collections from storage.

        A missing key gives an empty collection. Unreadable or malformed
        text also gives an empty collection and a warning in the log.
        Never raises.

        Returns:
            LoadedWorkspace with whatever could be recovered.
        """
        try:
            tasks = self._load_collection(TASKS_KEY, decode_tasks)
            notes = self._load_collection(NOTES_KEY, decode_notes)
        finally:
            self._loaded = True
        logger.info("Workspace loaded tasks=%d notes=%d", len(tasks), len(notes))
        return LoadedWorkspace(tasks=tasks, notes=notes)

    def _load_collection(
        self,
        key: str,
        decode: Callable[[str], Result[DecodedCollection, str]],
    ) -> list:
        try:
            text = self._storage.get_item(key)
        except StorageError as e:
            logger.warning("Failed to read %s, starting empty: %s", key, e)
            return []
        except Exception:
            logger.exception("Unexpected error reading %s, starting empty", key)
            return []

        if text is None:
            logger.debug("No stored value for %s", key)
            return []

        try:
            result = decode(text)
        except Exception:
            logger.exception("Unexpected error decoding %s, starting empty", key)
            return []
        if isinstance(result, Err):
            logger.warning("Discarding stored %s: %s", key, result.error)
            return []

        decoded: DecodedCollection = result.value
        for problem in decoded.problems:
            logger.warning("Skipped %s %s", key, problem)
        return decoded.records

    def save_tasks(self, tasks: Sequence[Task]) -> Result[None, str]:
        """Overwrite the stored task collection.

        Returns:
            Ok(None) if written, Err(str) if refused or the write failed.
        """
        return self._save(TASKS_KEY, encode_tasks(tasks))

    def save_notes(self, notes: Sequence[Note]) -> Result[None, str]:
        """Overwrite the stored note collection.

        Returns:
            Ok(None) if written, Err(str) if refused or the write failed.
        """
        return self._save(NOTES_KEY, encode_notes(notes))

    def _save(self, key: str, text: str) -> Result[None, str]:
        if not self._loaded:
            logger.warning("Refusing to save %s before the workspace is loaded", key)
            return Err(f"Cannot save {key} before load has completed")
        try:
            self._storage.set_item(key, text)
        except StorageError as e:
            logger.error("Failed to save %s: %s", key, e)
            return Err(f"Failed to save {key}: {e}")
        except Exception as e:
            logger.exception("Unexpected error saving %s", key)
            return Err(f"Failed to save {key}: {e!r}")
        return Ok(None)

    def clear(self) -> Result[None, str]:
        """Remove both keys from storage.

        Removing the keys (rather than writing empty arrays) leaves the
        medium as if no workspace had ever been saved.

        Returns:
            Ok(None) if both keys are gone, Err(str) otherwise.
        """
        errors: list[str] = []
        for key in (TASKS_KEY, NOTES_KEY):
            try:
                self._storage.remove_item(key)
            except StorageError as e:
                logger.error("Failed to remove %s: %s", key, e)
                errors.append(str(e))
            except Exception as e:
                logger.exception("Unexpected error removing %s", key)
                errors.append(repr(e))
        if errors:
            return Err("; ".join(errors))
        logger.info("Cleared stored workspace")
        return Ok(None)
