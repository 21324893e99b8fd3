# tests/fakes.py

from __future__ import annotations

from nexus.infrastructure.storage import MemoryKeyValueStorage, StorageError


class FakeClock:
    """
    Deterministic epoch-millisecond clock.

    - returns the same value until advanced
    - advance() moves it forward by a given number of ms
    """

    def __init__(self, start_ms: int = 1_700_000_000_000) -> None:
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int = 1) -> None:
        self.now_ms += ms


class SequentialIds:
    """Id generator producing id-0001, id-0002, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count:04d}"


class FailingStorage(MemoryKeyValueStorage):
    """
    Memory storage whose writes (and optionally reads) always fail.

    Used to check that storage errors never escape into the store.
    """

    def __init__(self, initial: dict[str, str] | None = None, fail_reads: bool = False) -> None:
        super().__init__(initial)
        self.fail_reads = fail_reads
        self.write_attempts = 0

    def get_item(self, key: str) -> str | None:
        if self.fail_reads:
            raise StorageError(f"read failed for {key}")
        return super().get_item(key)

    def set_item(self, key: str, value: str) -> None:
        self.write_attempts += 1
        raise StorageError(f"write failed for {key}")

    def remove_item(self, key: str) -> None:
        raise StorageError(f"remove failed for {key}")


class RecordingListener:
    """Collects every event a store emits."""

    def __init__(self) -> None:
        self.events: list = []

    def __call__(self, event) -> None:
        self.events.append(event)

    @property
    def kinds(self) -> list[str]:
        return [type(e).__name__ for e in self.events]


class BrokenStorage(MemoryKeyValueStorage):
    """
    Memory storage that fails with an arbitrary exception type.

    Stands in for a medium with a bug, as opposed to one reporting a
    StorageError.
    """

    def __init__(self, initial: dict[str, str] | None = None, fail_reads: bool = False) -> None:
        super().__init__(initial)
        self.fail_reads = fail_reads
        self.write_attempts = 0

    def get_item(self, key: str) -> str | None:
        if self.fail_reads:
            raise RuntimeError(f"medium crashed reading {key}")
        return super().get_item(key)

    def set_item(self, key: str, value: str) -> None:
        self.write_attempts += 1
        raise ValueError(f"medium crashed writing {key}")

    def remove_item(self, key: str) -> None:
        raise RuntimeError(f"medium crashed removing {key}")
