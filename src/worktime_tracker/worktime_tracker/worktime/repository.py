from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from .model import WorkRecord


class WorkRecordRepository(Protocol):
    """Single writer of the work-record collection.

    Records are addressed by ``(user_id, work_date)``; at most one per user per day.
    """

    def upsert(
        self,
        *,
        user_id: str,
        work_date: date,
        start_time: time,
        end_time: time,
        break_minutes: int,
        notes: Optional[str] = None,
    ) -> WorkRecord:
        raise NotImplementedError

    def find_by_user_and_date(self, user_id: str, work_date: date) -> Optional[WorkRecord]:
        raise NotImplementedError

    def list_by_user(self, user_id: str, limit: Optional[int] = None) -> Sequence[WorkRecord]:
        raise NotImplementedError

    def delete(self, user_id: str, record_id: str) -> bool:
        raise NotImplementedError
