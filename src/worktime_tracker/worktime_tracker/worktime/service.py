from __future__ import annotations

from datetime import date, datetime
from typing import Any, Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_iso_date, require_non_negative_int, require_time_of_day
from ..core.constants import DEFAULT_DAY_NAMES
from ..core.enums import WeekStart
from ..core.exceptions import ValidationError
from .aggregation import summarize, total_hours_between, weekly_series
from .model import DailyHours, WorkRecord, WorkSummary
from .repository import WorkRecordRepository


class WorkTimeService:
    """Use cases: record work time and read back history/statistics."""

    def __init__(
        self,
        records: WorkRecordRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        week_start: WeekStart = WeekStart.SUNDAY,
        day_names: Sequence[str] = DEFAULT_DAY_NAMES,
    ):
        self._records = records
        self._clock = clock
        self._week_start = week_start
        self._day_names = tuple(day_names)

    def _today(self) -> date:
        return self._clock().date()

    def record_work_time(
        self,
        user_id: str,
        *,
        work_date: Any,
        start_time: Any,
        end_time: Any,
        break_minutes: Any = 0,
        notes: Optional[str] = None,
    ) -> WorkRecord:
        """Create or replace the user's record for ``work_date``."""
        day = require_iso_date(work_date, "Date")
        start = require_time_of_day(start_time, "Start time")
        end = require_time_of_day(end_time, "End time")
        breaks = require_non_negative_int(break_minutes, "Break minutes")
        notes = str(notes).strip() if notes is not None else ""
        notes = notes or None

        return self._records.upsert(
            user_id=user_id,
            work_date=day,
            start_time=start,
            end_time=end,
            break_minutes=breaks,
            notes=notes,
        )

    def get_history(self, user_id: str, *, limit: Optional[int] = None) -> Sequence[WorkRecord]:
        return self._records.list_by_user(user_id, limit)

    def get_record_for_date(self, user_id: str, work_date: Any) -> Optional[WorkRecord]:
        return self._records.find_by_user_and_date(user_id, require_iso_date(work_date, "Date"))

    def get_summary(self, user_id: str) -> WorkSummary:
        records = self._records.list_by_user(user_id)
        return summarize(records, today=self._today(), week_start=self._week_start)

    def get_weekly_data(self, user_id: str) -> list[DailyHours]:
        records = self._records.list_by_user(user_id)
        return weekly_series(records, self._today(), day_names=self._day_names)

    def get_hours_between(self, user_id: str, start: Any, end: Any) -> float:
        start_d = require_iso_date(start, "Start date")
        end_d = require_iso_date(end, "End date")
        if end_d < start_d:
            raise ValidationError("End date must not be before start date")
        return total_hours_between(self._records.list_by_user(user_id), start_d, end_d)

    def delete_work_time(self, user_id: str, record_id: str) -> bool:
        return self._records.delete(user_id, record_id)
