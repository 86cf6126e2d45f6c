from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Optional

from ..common.datetime_utils import format_time_of_day, parse_iso_date, parse_time_of_day


@dataclass(frozen=True)
class WorkRecord:
    """One user's logged work interval for one calendar day.

    ``total_hours`` is derived from start/end/break by the repository on every write.
    """

    id: str
    user_id: str
    work_date: date
    start_time: time
    end_time: time
    break_minutes: int
    total_hours: float
    created_at: datetime
    updated_at: datetime
    notes: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "date": self.work_date.isoformat(),
            "startTime": format_time_of_day(self.start_time),
            "endTime": format_time_of_day(self.end_time),
            "breakMinutes": self.break_minutes,
            "totalHours": self.total_hours,
            "notes": self.notes,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WorkRecord":
        return cls(
            id=str(data["id"]),
            user_id=str(data["userId"]),
            work_date=parse_iso_date(data["date"]),
            start_time=parse_time_of_day(data["startTime"]),
            end_time=parse_time_of_day(data["endTime"]),
            break_minutes=int(data.get("breakMinutes", 0)),
            total_hours=float(data["totalHours"]),
            notes=data.get("notes"),
            created_at=datetime.fromisoformat(data["createdAt"]),
            updated_at=datetime.fromisoformat(data["updatedAt"]),
        )


@dataclass(frozen=True)
class WorkSummary:
    """Read-model: aggregate statistics of one user's records at query time."""

    total_days: int
    total_hours: float
    average_hours: float
    this_week_hours: float
    this_month_hours: float


@dataclass(frozen=True)
class DailyHours:
    """One bar of the 7-day chart."""

    date: date
    hours: float
    day_name: str
