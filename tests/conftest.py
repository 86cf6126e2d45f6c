from __future__ import annotations

from datetime import datetime

import pytest

from src.worktime_tracker.worktime_tracker.database.kv_store import MemoryKeyValueStore
from src.worktime_tracker.worktime_tracker.worktime.kv_work_record_repository import KeyValueWorkRecordRepository

from .fakes import FakeClock


@pytest.fixture
def clock():
    # Wednesday
    return FakeClock(datetime(2024, 1, 10, 9, 0, 0))


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def records_repo(store, clock):
    return KeyValueWorkRecordRepository(store, clock=clock)
