"""Key-value storage backends and JSON collection helpers.

A store maps string keys to JSON-encoded string values, the same shape as a
browser's localStorage. Repositories receive a store explicitly; passing None
means no store is available, in which case reads fall back to defaults and
writes are dropped.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from tally.logging_setup import get_logger

logger = get_logger(__name__)


class StorageError(Exception):
    """Raised when the storage file cannot be read or decoded."""


class KeyValueStore(Protocol):
    """Durable string key-value store."""

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...


class MemoryStore:
    """In-memory store, mainly for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """Store backed by a single JSON file of key -> string value.

    The whole file is read on every get and rewritten on every set, so the
    last writer wins. A missing file reads as an empty store.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as e:
            raise StorageError(f"Storage file {self.path} is not valid JSON: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot read storage file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self.path} does not contain a JSON object")
        return data

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".storage-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
                f.write("\n")
            os.replace(tmp_name, self.path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


def read_collection(store: KeyValueStore | None, key: str, default: list[Any]) -> list[Any]:
    """Read and decode a JSON array stored under key.

    Args:
        store: Store to read from. None means storage is unavailable.
        key: Storage key.
        default: Value returned when the store is unavailable or the key is absent.

    Returns:
        Decoded list (a fresh copy of default when nothing is stored).

    Raises:
        StorageError: If the stored value is not a JSON array.
    """
    if store is None:
        logger.debug("Storage unavailable, using default for %s", key)
        return list(default)

    raw = store.get(key)
    if raw is None:
        return list(default)

    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageError(f"Value under {key!r} is not valid JSON: {e}") from e

    if not isinstance(value, list):
        raise StorageError(f"Value under {key!r} is not a JSON array")
    return value


def write_collection(store: KeyValueStore | None, key: str, value: list[Any]) -> None:
    """Encode and store a JSON array under key.

    Writes are dropped when the store is unavailable.
    """
    if store is None:
        logger.debug("Storage unavailable, dropping write to %s", key)
        return
    store.set(key, json.dumps(value))
