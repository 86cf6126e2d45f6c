from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role tag carried by the public user view."""

    EMPLOYEE = "employee"


class WeekStart(str, Enum):
    """First day of the week used for the "this week" window."""

    SUNDAY = "sunday"
    MONDAY = "monday"
