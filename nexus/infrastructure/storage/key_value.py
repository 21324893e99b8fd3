"""Device-local key-value storage media.

A medium maps string keys to string values, like a browser's local
storage. It knows nothing about tasks or notes - the persistence adapter
decides what text goes under which key.

Two media are provided:
    FileKeyValueStorage - one file per key inside a data directory
    MemoryKeyValueStorage - a dict, for session-only use and tests

Media raise StorageError on failure; callers above the adapter never
see these exceptions.
"""

import contextlib
import errno
import logging
import re
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")
_FULL_ERRNOS = {
    getattr(errno, name) for name in ("ENOSPC", "EDQUOT", "EFBIG") if hasattr(errno, name)
}


class StorageError(Exception):
    """A storage medium could not read, write or remove a key."""


class StorageFullError(StorageError):
    """A write was refused because the medium is out of space."""


class KeyValueStorage(Protocol):
    """Interface every storage medium implements."""

    def get_item(self, key: str) -> str | None:
        """Return the text stored under key, or None if absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove key. Removing an absent key is not an error."""
        ...

    def has_item(self, key: str) -> bool:
        """Check whether key is present."""
        ...


def utf8_size(text: str) -> int:
    """Size of text in UTF-8 bytes, counting lone surrogates as 3 bytes."""
    return len(text.encode("utf-8", errors="surrogatepass"))


def _discard(path: Path) -> None:
    """Best-effort removal of a temp file after a failed write."""
    with contextlib.suppress(OSError):
        path.unlink(missing_ok=True)


def _check_key(key: str) -> str:
    if not _KEY_PATTERN.match(key):
        raise ValueError(f"Invalid storage key: {key!r}")
    return key


class FileKeyValueStorage:
    """Key-value storage backed by a directory of files.

    Each key is stored as ``<directory>/<key>.json``. A write replaces the
    whole file, so a reader never sees a partial value.

    Example:
        storage = FileKeyValueStorage(Path.home() / ".nexus")
        storage.set_item("nexus_tasks", "[]")
        storage.get_item("nexus_tasks")  # "[]"
    """

    def __init__(self, directory: Path) -> None:
        """Initialize the storage.

        Args:
            directory: Data directory. Created on first write.
        """
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        """Directory holding the key files."""
        return self._directory

    def path_for(self, key: str) -> Path:
        """Return the file path used for a key."""
        return self._directory / f"{_check_key(key)}.json"

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except PermissionError as e:
            raise StorageError(f"Permission denied reading {path}") from e
        except UnicodeDecodeError as e:
            raise StorageError(f"Undecodable text in {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Error reading {path}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            tmp_path.replace(path)
        except UnicodeEncodeError as e:
            _discard(tmp_path)
            raise StorageError(f"Unencodable text for {path}: {e.reason}") from e
        except PermissionError as e:
            _discard(tmp_path)
            raise StorageError(f"Permission denied writing {path}") from e
        except OSError as e:
            _discard(tmp_path)
            if e.errno in _FULL_ERRNOS:
                raise StorageFullError(f"No space left writing {path}") from e
            raise StorageError(f"Error writing {path}: {e}") from e
        logger.debug("Wrote %d chars to %s", len(value), path)

    def remove_item(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except PermissionError as e:
            raise StorageError(f"Permission denied deleting {path}") from e
        except OSError as e:
            raise StorageError(f"Error deleting {path}: {e}") from e

    def has_item(self, key: str) -> bool:
        return self.path_for(key).exists()


class MemoryKeyValueStorage:
    """Key-value storage held in a dict.

    Nothing survives the process. An optional quota makes writes that
    would push the total stored size past the limit fail with
    StorageFullError, the way a browser's storage quota does.
    """

    def __init__(
        self,
        initial: dict[str, str] | None = None,
        quota_bytes: int | None = None,
    ) -> None:
        """Initialize the storage.

        Args:
            initial: Starting key/value pairs (copied).
            quota_bytes: Maximum total UTF-8 size of all values, or None.
        """
        self._items: dict[str, str] = dict(initial or {})
        self._quota_bytes = quota_bytes

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self._quota_bytes is not None:
            others = sum(
                utf8_size(v) for k, v in self._items.items() if k != key
            )
            if others + utf8_size(value) > self._quota_bytes:
                raise StorageFullError(
                    f"Storage quota of {self._quota_bytes} bytes exceeded writing {key}"
                )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def has_item(self, key: str) -> bool:
        return key in self._items

    def as_dict(self) -> dict[str, str]:
        """Return a copy of everything stored."""
        return dict(self._items)
