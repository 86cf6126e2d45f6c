from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date


@dataclass(frozen=True)
class WeeklyPay:
    weekly_hours: float
    regular_hours: float
    overtime_hours: float
    regular_pay: float
    overtime_pay: float
    holiday_pay: float
    total_pay: float


@dataclass(frozen=True)
class WeeklyPayReport:
    user_id: str
    week_start: date
    week_end: date
    hourly_wage: float
    pay: WeeklyPay

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "week_start": self.week_start.isoformat(),
            "week_end": self.week_end.isoformat(),
            "hourly_wage": self.hourly_wage,
            **asdict(self.pay),
        }
