from __future__ import annotations

from datetime import date, datetime, time, timedelta

from ..core.enums import WeekStart


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time_of_day(value: str) -> time:
    """Parse HH:MM string into time (minute precision)."""
    return datetime.strptime(value, "%H:%M").time()


def format_time_of_day(value: time) -> str:
    return value.strftime("%H:%M")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_week(today: date, week_start: WeekStart = WeekStart.SUNDAY) -> date:
    # date.weekday(): Monday == 0 ... Sunday == 6
    if week_start == WeekStart.MONDAY:
        offset = today.weekday()
    else:
        offset = (today.weekday() + 1) % 7
    return today - timedelta(days=offset)


def start_of_month(today: date) -> date:
    return today.replace(day=1)


def sunday_index(day: date) -> int:
    """Day-of-week index with Sunday == 0."""
    return (day.weekday() + 1) % 7
