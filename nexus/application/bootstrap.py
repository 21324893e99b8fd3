"""Application controller start-up.

Builds the storage medium, the persistence adapter and the store, then
performs the one load. The returned store is handed to the view layer
explicitly; there is no module-level store.
"""

import logging
import random
from collections.abc import Callable
from pathlib import Path

from nexus.application.store import Clock, WorkspaceStore, epoch_millis
from nexus.config import NexusConfig
from nexus.infrastructure.storage import (
    FileKeyValueStorage,
    KeyValueStorage,
    MemoryKeyValueStorage,
    PersistenceAdapter,
)

logger = logging.getLogger(__name__)


def open_store(
    storage: KeyValueStorage,
    *,
    id_generator: Callable[[], str] | None = None,
    clock: Clock = epoch_millis,
    rng: random.Random | None = None,
) -> WorkspaceStore:
    """Create a store over a storage medium and load it.

    Args:
        storage: Medium holding the workspace keys.
        id_generator: Source of new ids (default: IdGenerator()).
        clock: Epoch-milliseconds clock.
        rng: Random instance for note colors.

    Returns:
        A loaded WorkspaceStore.
    """
    store = WorkspaceStore(
        PersistenceAdapter(storage),
        id_generator=id_generator,
        clock=clock,
        rng=rng,
    )
    store.load()
    return store


def open_workspace(config: NexusConfig, data_dir: Path | None = None) -> WorkspaceStore:
    """Open the on-disk workspace described by the configuration.

    Args:
        config: Loaded configuration.
        data_dir: Override for config.data_dir.

    Returns:
        A loaded WorkspaceStore backed by files.
    """
    directory = Path(data_dir or config.data_dir).expanduser()
    logger.debug("Opening workspace in %s", directory)
    return open_store(FileKeyValueStorage(directory))


def open_session_workspace() -> WorkspaceStore:
    """Open a workspace that lives only as long as the process."""
    return open_store(MemoryKeyValueStorage())
