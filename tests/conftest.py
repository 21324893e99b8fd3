# tests/conftest.py

from __future__ import annotations

import logging
import random
from pathlib import Path

import pytest

from nexus.application import WorkspaceStore
from nexus.infrastructure.storage import MemoryKeyValueStorage, PersistenceAdapter

from .fakes import FakeClock, SequentialIds


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Keep every test away from the real ~/.nexus and from handlers left
    behind by CLI runs.
    """
    monkeypatch.setenv("NEXUS_HOME", str(tmp_path / "nexus-home"))
    monkeypatch.delenv("NEXUS_DATA_DIR", raising=False)
    yield
    nexus_logger = logging.getLogger("nexus")
    for h in list(nexus_logger.handlers):
        nexus_logger.removeHandler(h)
        h.close()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture()
def storage() -> MemoryKeyValueStorage:
    return MemoryKeyValueStorage()


@pytest.fixture()
def adapter(storage: MemoryKeyValueStorage) -> PersistenceAdapter:
    return PersistenceAdapter(storage)


@pytest.fixture()
def store(adapter: PersistenceAdapter, ids: SequentialIds, clock: FakeClock) -> WorkspaceStore:
    """Loaded store over empty memory storage, with deterministic ids and time."""
    s = WorkspaceStore(adapter, id_generator=ids, clock=clock, rng=random.Random(7))
    s.load()
    return s
