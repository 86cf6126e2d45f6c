from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import start_of_week
from ..core.enums import WeekStart
from ..core.exceptions import ValidationError
from ..users.repository import UserRepository
from ..worktime.aggregation import total_hours_between
from ..worktime.repository import WorkRecordRepository
from .calculator.base import PayCalculator
from .calculator.standard_calculator import StandardWeeklyPayCalculator
from .model import WeeklyPayReport


class PayrollService:
    def __init__(
        self,
        records: WorkRecordRepository,
        users: UserRepository,
        *,
        calculator: Optional[PayCalculator] = None,
        week_start: WeekStart = WeekStart.SUNDAY,
    ):
        self._records = records
        self._users = users
        self._calculator = calculator or StandardWeeklyPayCalculator()
        self._week_start = week_start

    def weekly_pay(self, user_id: str, week_of: date, *, hourly_wage: Optional[float] = None) -> WeeklyPayReport:
        """Pay for the week containing ``week_of``; wage defaults to the user's own."""
        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("User not found")

        wage = user.hourly_wage if hourly_wage is None else float(hourly_wage)
        if wage < 0:
            raise ValidationError("Hourly wage cannot be negative")

        week_from = start_of_week(week_of, self._week_start)
        week_to = week_from + timedelta(days=6)
        hours = total_hours_between(self._records.list_by_user(user_id), week_from, week_to)

        return WeeklyPayReport(
            user_id=user_id,
            week_start=week_from,
            week_end=week_to,
            hourly_wage=wage,
            pay=self._calculator.weekly_pay(hours, wage),
        )
