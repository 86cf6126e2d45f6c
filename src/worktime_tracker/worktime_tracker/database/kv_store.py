from __future__ import annotations

import sqlite3
from typing import Dict, Optional, Protocol

from ..core.exceptions import StorageError
from .connection import DatabaseConnection
from .sqlite_base import db_cursor, fetchone


class KeyValueStore(Protocol):
    """Local string key-value store (the browser-storage equivalent).

    Values are serialized strings; callers own the format.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class MemoryKeyValueStore(KeyValueStore):
    """Process-private store backed by a dict."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._data)


class SQLiteKeyValueStore(KeyValueStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT value FROM kv_store WHERE key=?", (key,))
                row = fetchone(cur)
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read key {key!r}: {e}") from e
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO kv_store(key, value) VALUES(?, ?)
                    ON CONFLICT(key) DO UPDATE SET value=excluded.value
                    """,
                    (key, value),
                )
        except sqlite3.Error as e:
            raise StorageError(f"Failed to write key {key!r}: {e}") from e

    def remove(self, key: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM kv_store WHERE key=?", (key,))
        except sqlite3.Error as e:
            raise StorageError(f"Failed to remove key {key!r}: {e}") from e
