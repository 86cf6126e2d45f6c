"""Derived views over one user's work records.

All functions are pure: same records and same ``today`` give the same output.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Sequence

from ..common.datetime_utils import start_of_month, start_of_week, sunday_index
from ..core.constants import DEFAULT_DAY_NAMES, WEEKLY_SERIES_DAYS
from ..core.enums import WeekStart
from .model import DailyHours, WorkRecord, WorkSummary


def _sum_hours(records: Iterable[WorkRecord]) -> float:
    return sum((r.total_hours for r in records), 0.0)


def summarize(
    records: Sequence[WorkRecord],
    *,
    today: date,
    week_start: WeekStart = WeekStart.SUNDAY,
) -> WorkSummary:
    week_from = start_of_week(today, week_start)
    month_from = start_of_month(today)

    total_days = len(records)
    total_hours = _sum_hours(records)

    return WorkSummary(
        total_days=total_days,
        total_hours=total_hours,
        average_hours=total_hours / total_days if total_days else 0.0,
        this_week_hours=_sum_hours(r for r in records if r.work_date >= week_from),
        this_month_hours=_sum_hours(r for r in records if r.work_date >= month_from),
    )


def weekly_series(
    records: Sequence[WorkRecord],
    today: date,
    *,
    day_names: Sequence[str] = DEFAULT_DAY_NAMES,
) -> list[DailyHours]:
    """Exactly seven days, ``today - 6`` .. ``today`` ascending; gaps are 0 hours."""
    if len(day_names) != 7:
        raise ValueError("day_names must contain seven labels starting with Sunday")

    hours_by_date = {r.work_date: r.total_hours for r in records}

    series: list[DailyHours] = []
    for offset in range(WEEKLY_SERIES_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        series.append(
            DailyHours(
                date=day,
                hours=hours_by_date.get(day, 0.0),
                day_name=day_names[sunday_index(day)],
            )
        )
    return series


def total_hours_between(records: Sequence[WorkRecord], start: date, end: date) -> float:
    """Sum of hours for records dated within ``start``..``end`` inclusive."""
    return _sum_hours(r for r in records if start <= r.work_date <= end)
