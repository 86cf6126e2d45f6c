from __future__ import annotations

import base64
import json
import logging
import uuid
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_SESSION_HOURS, SESSION_KEY
from ..core.exceptions import StorageError
from ..database.kv_store import KeyValueStore
from ..users.model import PublicUser
from ..users.service import UserDirectory
from .model import LoginResult, Session

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."
INACTIVE_ACCOUNT_MESSAGE = "This account has been deactivated."


class SessionManager:
    """Issues and checks one login session stored under ``key``.

    States: no session -> active -> expired; an expired session is removed the
    next time it is checked, so it collapses back to "no session".
    """

    def __init__(
        self,
        store: KeyValueStore,
        directory: UserDirectory,
        *,
        key: str = SESSION_KEY,
        duration: timedelta = timedelta(hours=DEFAULT_SESSION_HOURS),
        clock: Callable[[], datetime] = now_local,
    ):
        self._store = store
        self._directory = directory
        self._key = key
        self._duration = duration
        self._clock = clock

    @staticmethod
    def _generate_token(user_id: str, now: datetime) -> str:
        raw = f"{user_id}:{int(now.timestamp() * 1000)}:{uuid.uuid4().hex}"
        return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")

    def _load(self) -> Optional[Session]:
        try:
            raw = self._store.get(self._key)
        except StorageError:
            logger.warning("Session unreadable (key=%s); treating as logged out", self._key, exc_info=True)
            return None
        if not raw:
            return None
        try:
            return Session.from_dict(json.loads(raw))
        except (ValueError, TypeError, KeyError):
            logger.warning("Session corrupt (key=%s); treating as logged out", self._key, exc_info=True)
            return None

    def _save(self, session: Session) -> None:
        self._store.set(self._key, json.dumps(session.to_dict(), ensure_ascii=False))

    def _active_session(self) -> Optional[Session]:
        session = self._load()
        if not session:
            return None
        if not session.is_valid_at(self._clock()):
            logger.info("Session for user=%s expired at %s", session.user.id, session.expiry_time.isoformat())
            try:
                self.logout()
            except StorageError:
                logger.warning("Could not remove expired session (key=%s)", self._key, exc_info=True)
            return None
        return session

    def login(self, email: str, password: str) -> LoginResult:
        user = self._directory.authenticate(email, password)
        if not user:
            logger.info("Login failed for %s: invalid credentials", email)
            return LoginResult(success=False, error=INVALID_CREDENTIALS_MESSAGE)
        if not user.is_active:
            logger.info("Login refused for %s: account inactive", email)
            return LoginResult(success=False, error=INACTIVE_ACCOUNT_MESSAGE)

        now = self._clock()
        public = PublicUser(id=user.user_id, name=user.full_name, email=user.email)
        session = Session(
            token=self._generate_token(user.user_id, now),
            user=public,
            login_time=now,
            expiry_time=now + self._duration,
        )
        self._save(session)
        logger.info("Login succeeded for user=%s", user.user_id)
        return LoginResult(success=True, user=public)

    def logout(self) -> None:
        self._store.remove(self._key)

    def is_authenticated(self) -> bool:
        return self._active_session() is not None

    def current_user(self) -> Optional[PublicUser]:
        session = self._active_session()
        return session.user if session else None

    def current_session(self) -> Optional[Session]:
        return self._active_session()

    def extend_session(self) -> None:
        """Sliding renewal: expiry becomes now + duration. No-op without a valid session."""
        session = self._active_session()
        if not session:
            return
        self._save(replace(session, expiry_time=self._clock() + self._duration))

    def time_until_expiry(self) -> timedelta:
        """Remaining lifetime of the stored session, never negative."""
        session = self._load()
        if not session:
            return timedelta(0)
        return max(timedelta(0), session.expiry_time - self._clock())
