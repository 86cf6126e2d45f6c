from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from .auth.session import SessionManager
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_DAY_NAMES, DEFAULT_SESSION_HOURS, SESSION_KEY
from .core.enums import WeekStart
from .database.connection import DBConfig, DatabaseConnection
from .database.kv_store import KeyValueStore, SQLiteKeyValueStore
from .payroll.service import PayrollService
from .users.service import UserDirectory
from .users.sqlite_user_repository import SQLiteUserRepository
from .worktime.kv_work_record_repository import KeyValueWorkRecordRepository
from .worktime.service import WorkTimeService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    kv_store: KeyValueStore
    users_repo: SQLiteUserRepository
    work_records_repo: KeyValueWorkRecordRepository

    user_directory: UserDirectory
    work_time_service: WorkTimeService
    payroll_service: PayrollService

    session_duration: timedelta
    clock: Callable[[], datetime]

    def sessions_for(self, client_id: str) -> SessionManager:
        """Session manager bound to one client's private session slot."""
        return SessionManager(
            self.kv_store,
            self.user_directory,
            key=f"{SESSION_KEY}:{client_id}",
            duration=self.session_duration,
            clock=self.clock,
        )

    def close(self) -> None:
        self.conn.close()


def build_container(
    *,
    db_config: dict,
    session_hours: int = DEFAULT_SESSION_HOURS,
    week_starts_on: str = WeekStart.SUNDAY.value,
    day_names: Sequence[str] = DEFAULT_DAY_NAMES,
    clock: Callable[[], datetime] = now_local,
    kv_store: Optional[KeyValueStore] = None,
) -> Container:
    config = DBConfig(path=str(db_config.get("path", ":memory:")))
    conn = DatabaseConnection(config).open()

    try:
        week_start = WeekStart(str(week_starts_on).lower())
    except ValueError:
        raise ValueError(f"WEEK_STARTS_ON must be 'sunday' or 'monday', got {week_starts_on!r}")

    store = kv_store or SQLiteKeyValueStore(conn)
    users_repo = SQLiteUserRepository(conn)
    work_records_repo = KeyValueWorkRecordRepository(store, clock=clock)

    user_directory = UserDirectory(users_repo)
    work_time_service = WorkTimeService(
        work_records_repo,
        clock=clock,
        week_start=week_start,
        day_names=day_names,
    )
    payroll_service = PayrollService(work_records_repo, users_repo, week_start=week_start)

    return Container(
        conn=conn,
        kv_store=store,
        users_repo=users_repo,
        work_records_repo=work_records_repo,
        user_directory=user_directory,
        work_time_service=work_time_service,
        payroll_service=payroll_service,
        session_duration=timedelta(hours=int(session_hours)),
        clock=clock,
    )
