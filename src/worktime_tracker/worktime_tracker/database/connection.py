from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass
from typing import Optional


@dataclass
class DBConfig:
    path: str


class DatabaseConnection:
    """Owns one SQLite connection for the lifetime of the app.

    Note: Built by the container and passed to repositories explicitly.
    Call ``open()`` before use and ``close()`` on shutdown (or use ``with``).
    The connection is shared by Flask worker threads, so every use must hold
    ``lock`` (``db_cursor`` does).
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def path(self) -> str:
        return self._config.path

    def open(self) -> "DatabaseConnection":
        if self._conn is None:
            # Shared across threads; callers serialize through self.lock.
            self._conn = sqlite3.connect(self._config.path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
        return self

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def connect(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Database connection is not open. Call open() first.")
        return self._conn

    def __enter__(self) -> "DatabaseConnection":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()
