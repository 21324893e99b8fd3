"""Storage infrastructure for Nexus.

Key-value storage media plus the persistence adapter that mirrors the
workspace collections onto them, using Result types for explicit error
handling.
"""

from nexus.infrastructure.storage.codec import (
    NOTES_KEY,
    TASKS_KEY,
    DecodedCollection,
    decode_notes,
    decode_tasks,
    encode_notes,
    encode_tasks,
)
from nexus.infrastructure.storage.key_value import (
    FileKeyValueStorage,
    KeyValueStorage,
    MemoryKeyValueStorage,
    StorageError,
    StorageFullError,
    utf8_size,
)
from nexus.infrastructure.storage.persistence import LoadedWorkspace, PersistenceAdapter

__all__ = [
    "TASKS_KEY",
    "NOTES_KEY",
    "DecodedCollection",
    "encode_tasks",
    "encode_notes",
    "decode_tasks",
    "decode_notes",
    "KeyValueStorage",
    "FileKeyValueStorage",
    "MemoryKeyValueStorage",
    "StorageError",
    "StorageFullError",
    "utf8_size",
    "LoadedWorkspace",
    "PersistenceAdapter",
]
