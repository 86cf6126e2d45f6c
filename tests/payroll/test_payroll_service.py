from __future__ import annotations

from datetime import date, time

import pytest

from src.worktime_tracker.worktime_tracker.core.enums import WeekStart
from src.worktime_tracker.worktime_tracker.core.exceptions import ValidationError
from src.worktime_tracker.worktime_tracker.payroll.service import PayrollService
from src.worktime_tracker.worktime_tracker.users.model import User

from ..fakes import InMemoryUsers


@pytest.fixture
def users():
    repo = InMemoryUsers()
    repo.add(User(user_id="u1", full_name="Kim", email="k@store.com", password_hash="x", hourly_wage=10000))
    return repo


def _work(repo, day: date, start: time, end: time):
    repo.upsert(user_id="u1", work_date=day, start_time=start, end_time=end, break_minutes=0)


def test_weekly_pay_sums_hours_in_sunday_week(records_repo, users):
    _work(records_repo, date(2024, 1, 6), time(9, 0), time(17, 0))  # previous Saturday
    _work(records_repo, date(2024, 1, 7), time(9, 0), time(17, 0))
    _work(records_repo, date(2024, 1, 13), time(9, 0), time(17, 0))

    report = PayrollService(records_repo, users).weekly_pay("u1", date(2024, 1, 10))

    assert report.week_start == date(2024, 1, 7)
    assert report.week_end == date(2024, 1, 13)
    assert report.pay.weekly_hours == 16
    assert report.pay.regular_pay == 160000
    assert report.to_dict()["total_pay"] == report.pay.total_pay


def test_weekly_pay_with_monday_weeks(records_repo, users):
    _work(records_repo, date(2024, 1, 7), time(9, 0), time(17, 0))

    report = PayrollService(records_repo, users, week_start=WeekStart.MONDAY).weekly_pay("u1", date(2024, 1, 10))

    assert report.week_start == date(2024, 1, 8)
    assert report.pay.weekly_hours == 0


def test_wage_override(records_repo, users):
    _work(records_repo, date(2024, 1, 8), time(9, 0), time(10, 0))

    report = PayrollService(records_repo, users).weekly_pay("u1", date(2024, 1, 8), hourly_wage=20000)

    assert report.hourly_wage == 20000
    assert report.pay.regular_pay == 20000


def test_unknown_user_rejected(records_repo, users):
    with pytest.raises(ValidationError):
        PayrollService(records_repo, users).weekly_pay("ghost", date(2024, 1, 8))
