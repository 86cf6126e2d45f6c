from __future__ import annotations

from datetime import time

from ..core.constants import MINUTES_PER_DAY


def _minutes(t: time) -> int:
    return t.hour * 60 + t.minute


def elapsed_hours(start: time, end: time, break_minutes: int) -> float:
    """Worked hours between ``start`` and ``end`` minus the break.

    An ``end`` earlier than ``start`` is an overnight shift (22:00 -> 06:00).
    Never negative: a break longer than the span yields 0. A negative break
    counts as no break.
    """
    start_minutes = _minutes(start)
    end_minutes = _minutes(end)
    if end_minutes < start_minutes:
        end_minutes += MINUTES_PER_DAY

    total = end_minutes - start_minutes - max(0, int(break_minutes or 0))
    return max(0, total) / 60
