"""Durable key/value storage backends for the feedback history.

Updates:
    v0.1.0 - 2026-10-12 - Added in-memory, JSON file and SQLite backends.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional, Protocol

from .sqlite_client import SQLiteClient

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class StorageBackend(Protocol):
    """Minimal key/value contract the history store persists through."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored string for ``key`` or ``None`` when absent."""

        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

        ...

    def remove(self, key: str) -> None:
        """Delete ``key``; missing keys are ignored."""

        ...


class InMemoryStorage:
    """Dictionary-backed storage for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def remove(self, key: str) -> None:
        self.values.pop(key, None)


class JsonFileStorage:
    """Stores each key as ``<directory>/<key>.json``."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Unsupported storage key: {key!r}")
        return self._directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(f"{path.name}.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)
        logger.debug("storage_written", extra={"key": key, "path": str(path)})

    def remove(self, key: str) -> None:
        path = self.path_for(key)
        path.unlink(missing_ok=True)


class SQLiteStorage:
    """Key/value storage in a SQLite table."""

    def __init__(self, sqlite_client: SQLiteClient) -> None:
        self._sqlite = sqlite_client
        self._sqlite.initialize_schema()

    def get(self, key: str) -> Optional[str]:
        return self._sqlite.fetch_value(key)

    def set(self, key: str, value: str) -> None:
        self._sqlite.upsert_value(key, value)

    def remove(self, key: str) -> None:
        self._sqlite.delete_value(key)


def create_storage(config: dict) -> StorageBackend:
    """Build the storage backend named in the ``storage`` configuration section.

    Args:
        config (dict): Storage settings with ``backend``, ``path`` and ``sqlite_path``.

    Returns:
        StorageBackend: Configured backend instance.

    Raises:
        ValueError: If the backend name is not recognized.
    """

    backend = str(config.get("backend", "json")).lower()
    if backend == "json":
        return JsonFileStorage(config.get("path", "./data"))
    if backend == "sqlite":
        return SQLiteStorage(SQLiteClient(config.get("sqlite_path", "./data/feedback.db")))
    if backend == "memory":
        return InMemoryStorage()
    raise ValueError(f"Unknown storage backend: {backend}")


__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "SQLiteStorage",
    "StorageBackend",
    "create_storage",
]
