from __future__ import annotations

import json
import logging
import uuid
from dataclasses import replace
from datetime import date, datetime, time
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import WORK_RECORDS_KEY
from ..core.exceptions import StorageError
from ..database.kv_store import KeyValueStore
from .calculator import elapsed_hours
from .model import WorkRecord
from .repository import WorkRecordRepository

logger = logging.getLogger(__name__)


class KeyValueWorkRecordRepository(WorkRecordRepository):
    """Stores every user's records as one JSON array under a single key.

    Each mutation is a read-modify-write of the whole collection.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        key: str = WORK_RECORDS_KEY,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ):
        self._store = store
        self._key = key
        self._clock = clock
        self._id_factory = id_factory

    def _load_all(self, *, for_write: bool = False) -> list[WorkRecord]:
        """Whole collection. Read failures give [] for queries but propagate for writes."""
        try:
            raw = self._store.get(self._key)
        except StorageError:
            if for_write:
                raise
            logger.warning("Work records unreadable (key=%s); treating as empty", self._key, exc_info=True)
            return []
        if not raw:
            return []
        try:
            return [WorkRecord.from_dict(item) for item in json.loads(raw)]
        except (ValueError, TypeError, KeyError):
            logger.warning("Work records corrupt (key=%s); treating as empty", self._key, exc_info=True)
            return []

    def _save_all(self, records: list[WorkRecord]) -> None:
        self._store.set(self._key, json.dumps([r.to_dict() for r in records], ensure_ascii=False))

    def upsert(
        self,
        *,
        user_id: str,
        work_date: date,
        start_time: time,
        end_time: time,
        break_minutes: int,
        notes: Optional[str] = None,
    ) -> WorkRecord:
        records = self._load_all(for_write=True)
        now = self._clock()
        total_hours = elapsed_hours(start_time, end_time, break_minutes)

        index = next(
            (i for i, r in enumerate(records) if r.user_id == user_id and r.work_date == work_date),
            None,
        )

        if index is not None:
            record = replace(
                records[index],
                start_time=start_time,
                end_time=end_time,
                break_minutes=break_minutes,
                total_hours=total_hours,
                notes=notes,
                updated_at=now,
            )
            records[index] = record
        else:
            record = WorkRecord(
                id=self._id_factory(),
                user_id=user_id,
                work_date=work_date,
                start_time=start_time,
                end_time=end_time,
                break_minutes=break_minutes,
                total_hours=total_hours,
                notes=notes,
                created_at=now,
                updated_at=now,
            )
            records.append(record)

        self._save_all(records)
        logger.debug("Saved work record %s for user=%s date=%s", record.id, user_id, work_date)
        return record

    def find_by_user_and_date(self, user_id: str, work_date: date) -> Optional[WorkRecord]:
        for r in self._load_all():
            if r.user_id == user_id and r.work_date == work_date:
                return r
        return None

    def list_by_user(self, user_id: str, limit: Optional[int] = None) -> Sequence[WorkRecord]:
        items = [r for r in self._load_all() if r.user_id == user_id]
        items.sort(key=lambda r: r.work_date, reverse=True)
        # limit of 0, None or a negative number means no limit
        return items[:limit] if limit and limit > 0 else items

    def delete(self, user_id: str, record_id: str) -> bool:
        records = self._load_all(for_write=True)
        remaining = [r for r in records if not (r.id == record_id and r.user_id == user_id)]
        if len(remaining) == len(records):
            return False

        self._save_all(remaining)
        logger.debug("Deleted work record %s for user=%s", record_id, user_id)
        return True
