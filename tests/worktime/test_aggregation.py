from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.worktime_tracker.worktime_tracker.core.enums import WeekStart
from src.worktime_tracker.worktime_tracker.worktime.aggregation import summarize, total_hours_between, weekly_series
from src.worktime_tracker.worktime_tracker.worktime.model import WorkRecord

TODAY = date(2024, 1, 10)  # Wednesday


def _record(day: date, hours: float, user_id: str = "u1") -> WorkRecord:
    stamp = datetime(2024, 1, 1, 12, 0)
    return WorkRecord(
        id=f"{user_id}-{day.isoformat()}",
        user_id=user_id,
        work_date=day,
        start_time=time(9, 0),
        end_time=time(17, 0),
        break_minutes=0,
        total_hours=hours,
        created_at=stamp,
        updated_at=stamp,
    )


def test_summary_totals_and_average():
    records = [_record(date(2024, 1, 1), 8.0), _record(date(2024, 1, 8), 4.0)]

    summary = summarize(records, today=TODAY)

    assert summary.total_days == 2
    assert summary.total_hours == 12
    assert summary.average_hours == 6
    assert summary.this_week_hours == 4
    assert summary.this_month_hours == 12


def test_summary_of_no_records_is_all_zero():
    summary = summarize([], today=TODAY)

    assert summary.total_days == 0
    assert summary.total_hours == 0
    assert summary.average_hours == 0


def test_week_starts_on_sunday_by_default():
    records = [_record(date(2024, 1, 6), 1.0), _record(date(2024, 1, 7), 3.0), _record(date(2024, 1, 9), 5.0)]

    assert summarize(records, today=TODAY).this_week_hours == 8.0


def test_week_can_start_on_monday():
    records = [_record(date(2024, 1, 7), 3.0), _record(date(2024, 1, 9), 5.0)]

    assert summarize(records, today=TODAY, week_start=WeekStart.MONDAY).this_week_hours == 5.0


def test_sunday_today_is_its_own_week_start():
    sunday = date(2024, 1, 14)
    records = [_record(date(2024, 1, 13), 2.0), _record(sunday, 6.0)]

    assert summarize(records, today=sunday).this_week_hours == 6.0


def test_month_window_excludes_previous_month():
    records = [_record(date(2023, 12, 31), 7.0), _record(date(2024, 1, 2), 2.5)]

    summary = summarize(records, today=TODAY)

    assert summary.this_month_hours == 2.5
    assert summary.total_hours == 9.5


def test_weekly_series_has_seven_gap_filled_days():
    records = [_record(date(2024, 1, 10), 8.0), _record(date(2024, 1, 5), 3.5), _record(date(2023, 12, 1), 9.0)]

    series = weekly_series(records, TODAY)

    assert [d.date for d in series] == [date(2024, 1, day) for day in range(4, 11)]
    assert [d.hours for d in series] == [0, 3.5, 0, 0, 0, 0, 8.0]
    assert [d.day_name for d in series] == ["Thu", "Fri", "Sat", "Sun", "Mon", "Tue", "Wed"]


def test_weekly_series_without_records_is_still_seven_days():
    series = weekly_series([], TODAY)

    assert len(series) == 7
    assert all(d.hours == 0 for d in series)


def test_weekly_series_uses_given_day_names():
    names = ("일", "월", "화", "수", "목", "금", "토")

    series = weekly_series([], TODAY, day_names=names)

    assert series[-1].day_name == "수"
    assert series[3].day_name == "일"


def test_weekly_series_rejects_incomplete_day_names():
    with pytest.raises(ValueError):
        weekly_series([], TODAY, day_names=("Mon", "Tue"))


def test_aggregations_are_repeatable():
    records = [_record(date(2024, 1, 9), 5.0)]

    assert summarize(records, today=TODAY) == summarize(records, today=TODAY)
    assert weekly_series(records, TODAY) == weekly_series(records, TODAY)


def test_total_hours_between_is_inclusive():
    records = [_record(date(2024, 1, 1), 8.0), _record(date(2024, 1, 7), 4.0), _record(date(2024, 1, 8), 2.0)]

    assert total_hours_between(records, date(2024, 1, 1), date(2024, 1, 7)) == 12.0
