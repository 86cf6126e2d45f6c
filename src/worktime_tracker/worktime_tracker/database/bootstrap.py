from __future__ import annotations

from pathlib import Path

from werkzeug.security import generate_password_hash

from .connection import DatabaseConnection
from .sqlite_base import db_cursor, fetchall, fetchone

DEMO_USERS = (
    ("1", "Kim Employee", "employee1@store.com"),
    ("2", "Lee Worker", "employee2@store.com"),
    ("3", "Park Parttime", "employee3@store.com"),
    ("4", "Choi Staff", "employee4@store.com"),
)
DEMO_PASSWORD = "1234"
DEMO_HOURLY_WAGE = 10030.0


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    sql = Path(schema_path).read_text(encoding="utf-8")
    with conn_factory.lock:
        conn = conn_factory.connect()
        conn.executescript(sql)
        conn.commit()


def ensure_demo_users(conn_factory: DatabaseConnection) -> None:
    with db_cursor(conn_factory) as (_, cur):

        def upsert_user(user_id: str, full_name: str, email: str, password: str) -> None:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT user_id FROM users WHERE email=?", (email,))
            existing = fetchone(cur)
            if existing:
                cur.execute(
                    """
                    UPDATE users
                    SET full_name=?, password_hash=?, is_active=1
                    WHERE email=?
                    """,
                    (full_name, password_hash, email),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO users (user_id, full_name, email, password_hash, is_active, is_password_temp, hourly_wage)
                    VALUES (?, ?, ?, ?, 1, 0, ?)
                    """,
                    (user_id, full_name, email, password_hash, DEMO_HOURLY_WAGE),
                )

        for user_id, full_name, email in DEMO_USERS:
            upsert_user(user_id, full_name, email, DEMO_PASSWORD)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute("SELECT name FROM sqlite_master WHERE type='table' ORDER BY name")
        return [row["name"] for row in fetchall(cur)]
