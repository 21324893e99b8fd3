"""Infrastructure layer for Nexus.

Adapters between the application and the outside world. Currently the
only concern here is storage.
"""

from nexus.infrastructure.storage import (
    FileKeyValueStorage,
    MemoryKeyValueStorage,
    PersistenceAdapter,
)

__all__ = [
    "FileKeyValueStorage",
    "MemoryKeyValueStorage",
    "PersistenceAdapter",
]
