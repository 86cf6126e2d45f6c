from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, full_name, email, password_hash, is_active, is_password_temp, hourly_wage"


def _to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=str(row["user_id"]),
        full_name=row["full_name"],
        email=row["email"],
        password_hash=row["password_hash"],
        is_active=bool(row["is_active"]),
        is_password_temp=bool(row["is_password_temp"]),
        hourly_wage=float(row["hourly_wage"] or 0),
    )


class SQLiteUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=?", (user_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=?", (email,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def list_active(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE is_active=1 ORDER BY full_name")
            return [_to_user(r) for r in fetchall(cur)]

    def create_user(
        self,
        *,
        user_id: str,
        full_name: str,
        email: str,
        password_hash: str,
        is_password_temp: bool,
        hourly_wage: float,
    ) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(user_id, full_name, email, password_hash, is_active, is_password_temp, hourly_wage)
                VALUES(?,?,?,?,1,?,?)
                """,
                (user_id, full_name, email, password_hash, int(is_password_temp), float(hourly_wage)),
            )
            return user_id

    def set_active(self, user_id: str, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET is_active=? WHERE user_id=?", (int(is_active), user_id))
            return cur.rowcount > 0
