from __future__ import annotations

from ...core.constants import (
    HOLIDAY_PAY_DAILY_HOURS,
    HOLIDAY_PAY_MIN_HOURS,
    OVERTIME_RATE,
    REGULAR_WEEKLY_HOURS,
)
from ..model import WeeklyPay
from .base import PayCalculator


class StandardWeeklyPayCalculator(PayCalculator):
    """Standard rule: up to 40h regular, beyond that 1.5x, plus weekly holiday pay.

    Holiday pay is one 8h day when the week reaches 15h, pro-rated below that.
    """

    def holiday_pay(self, weekly_hours: float, hourly_wage: float) -> float:
        if weekly_hours >= HOLIDAY_PAY_MIN_HOURS:
            return hourly_wage * HOLIDAY_PAY_DAILY_HOURS
        if weekly_hours > 0:
            return (weekly_hours / REGULAR_WEEKLY_HOURS) * hourly_wage * HOLIDAY_PAY_DAILY_HOURS
        return 0.0

    def weekly_pay(self, weekly_hours: float, hourly_wage: float) -> WeeklyPay:
        regular_hours = min(weekly_hours, REGULAR_WEEKLY_HOURS)
        overtime_hours = max(weekly_hours - REGULAR_WEEKLY_HOURS, 0)

        regular_pay = regular_hours * hourly_wage
        overtime_pay = overtime_hours * hourly_wage * OVERTIME_RATE
        holiday_pay = self.holiday_pay(weekly_hours, hourly_wage)

        return WeeklyPay(
            weekly_hours=weekly_hours,
            regular_hours=regular_hours,
            overtime_hours=overtime_hours,
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            holiday_pay=holiday_pay,
            total_pay=regular_pay + overtime_pay + holiday_pay,
        )
