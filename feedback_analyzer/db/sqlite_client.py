"""SQLite client utilities.

Updates:
    v0.1.0 - 2026-10-12 - Reduced the client to a key/value table for durable state.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Optional

KV_TABLE_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


class SQLiteClient:
    """Lightweight wrapper around sqlite3 for persisted application state."""

    def __init__(self, db_path: str | Path) -> None:
        """Initialize the SQLite client.

        Args:
            db_path (str | Path): Path to the SQLite database file, or ``:memory:``.
        """

        self._db_path = str(db_path)
        if self._db_path != ":memory:":
            Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)
        self._connection: Optional[sqlite3.Connection] = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Return or lazily initialize the SQLite connection."""
        if self._connection is None:
            self._connection = sqlite3.connect(self._db_path, check_same_thread=False)
            self._connection.row_factory = sqlite3.Row
        return self._connection

    def initialize_schema(self) -> None:
        """Ensure the key/value table exists."""
        with self.connection as conn:
            conn.execute(KV_TABLE_SCHEMA)

    def fetch_value(self, key: str) -> Optional[str]:
        """Return the stored value for ``key`` or ``None`` when absent."""

        cursor = self.connection.execute(
            "SELECT value FROM kv_store WHERE key = ?", (key,)
        )
        row = cursor.fetchone()
        return row["value"] if row else None

    def upsert_value(self, key: str, value: str) -> None:
        """Insert or replace the value stored under ``key``.

        Args:
            key (str): Storage key.
            value (str): Serialized payload.
        """

        query = """
        INSERT INTO kv_store (key, value, updated_at)
        VALUES (?, ?, CURRENT_TIMESTAMP)
        ON CONFLICT(key) DO UPDATE SET
            value = excluded.value,
            updated_at = excluded.updated_at
        """
        with self.connection as conn:
            conn.execute(query, (key, value))

    def delete_value(self, key: str) -> bool:
        with self.connection as conn:
            cursor = conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            return cursor.rowcount > 0

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None
