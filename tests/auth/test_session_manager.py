from __future__ import annotations

import json
from datetime import timedelta

import pytest
from werkzeug.security import generate_password_hash

from src.worktime_tracker.worktime_tracker.auth.session import (
    INACTIVE_ACCOUNT_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    SessionManager,
)
from src.worktime_tracker.worktime_tracker.core.constants import SESSION_KEY
from src.worktime_tracker.worktime_tracker.core.enums import Role
from src.worktime_tracker.worktime_tracker.database.kv_store import MemoryKeyValueStore
from src.worktime_tracker.worktime_tracker.users.model import User
from src.worktime_tracker.worktime_tracker.users.service import UserDirectory

from ..fakes import BrokenStore, InMemoryUsers


@pytest.fixture
def directory():
    users = InMemoryUsers()
    users.add(User(user_id="1", full_name="Kim Employee", email="employee1@store.com", password_hash=generate_password_hash("1234")))
    users.add(
        User(
            user_id="9",
            full_name="Gone Away",
            email="former@store.com",
            password_hash=generate_password_hash("1234"),
            is_active=False,
        )
    )
    return UserDirectory(users)


@pytest.fixture
def sessions(store, directory, clock):
    return SessionManager(store, directory, clock=clock)


def test_login_success_stores_session_for_eight_hours(sessions, store, clock):
    result = sessions.login("employee1@store.com", "1234")

    assert result.success is True
    assert result.user.id == "1"
    assert result.user.name == "Kim Employee"
    assert result.user.role == Role.EMPLOYEE

    stored = json.loads(store.get(SESSION_KEY))
    assert stored["user"]["email"] == "employee1@store.com"
    assert stored["token"]
    assert sessions.current_session().expiry_time == clock.now + timedelta(hours=8)
    assert sessions.is_authenticated() is True


def test_bad_password_and_inactive_account_have_distinct_errors(sessions, store):
    bad = sessions.login("employee1@store.com", "nope")
    unknown = sessions.login("nobody@store.com", "1234")
    inactive = sessions.login("former@store.com", "1234")

    assert (bad.success, bad.error) == (False, INVALID_CREDENTIALS_MESSAGE)
    assert unknown.error == INVALID_CREDENTIALS_MESSAGE
    assert (inactive.success, inactive.error) == (False, INACTIVE_ACCOUNT_MESSAGE)
    assert INVALID_CREDENTIALS_MESSAGE != INACTIVE_ACCOUNT_MESSAGE
    assert store.get(SESSION_KEY) is None


def test_tokens_differ_between_logins(sessions, store):
    sessions.login("employee1@store.com", "1234")
    first = json.loads(store.get(SESSION_KEY))["token"]
    sessions.login("employee1@store.com", "1234")

    assert json.loads(store.get(SESSION_KEY))["token"] != first


def test_session_valid_up_to_and_including_expiry(sessions, clock):
    sessions.login("employee1@store.com", "1234")
    clock.advance(hours=8)

    assert sessions.is_authenticated() is True


def test_expired_session_is_purged_on_check(sessions, store, clock):
    sessions.login("employee1@store.com", "1234")
    clock.advance(hours=8, seconds=1)

    assert sessions.is_authenticated() is False
    assert store.get(SESSION_KEY) is None
    assert sessions.current_user() is None


def test_current_user_requires_valid_session(sessions):
    assert sessions.current_user() is None

    sessions.login("employee1@store.com", "1234")

    assert sessions.current_user().email == "employee1@store.com"


def test_extend_session_slides_expiry_forward(sessions, clock):
    sessions.login("employee1@store.com", "1234")
    before = sessions.current_session().expiry_time
    clock.advance(hours=2)

    sessions.extend_session()

    after = sessions.current_session().expiry_time
    assert after > before
    assert after == clock.now + timedelta(hours=8)


def test_extend_session_without_session_changes_nothing(sessions, store):
    sessions.extend_session()

    assert store.snapshot() == {}


def test_extend_expired_session_is_noop(sessions, store, clock):
    sessions.login("employee1@store.com", "1234")
    clock.advance(hours=9)

    sessions.extend_session()

    assert store.get(SESSION_KEY) is None


def test_logout_clears_session(sessions, store):
    sessions.login("employee1@store.com", "1234")
    sessions.logout()
    sessions.logout()

    assert store.get(SESSION_KEY) is None
    assert sessions.is_authenticated() is False


def test_time_until_expiry(sessions, clock):
    assert sessions.time_until_expiry() == timedelta(0)

    sessions.login("employee1@store.com", "1234")
    clock.advance(hours=3)
    assert sessions.time_until_expiry() == timedelta(hours=5)

    clock.advance(hours=6)
    assert sessions.time_until_expiry() == timedelta(0)


def test_corrupt_session_blob_means_logged_out(directory, clock):
    store = MemoryKeyValueStore({SESSION_KEY: '{"token": "x"}'})
    sessions = SessionManager(store, directory, clock=clock)

    assert sessions.is_authenticated() is False
    assert sessions.current_user() is None


def test_unreadable_store_means_logged_out(directory, clock):
    sessions = SessionManager(BrokenStore(), directory, clock=clock)

    assert sessions.is_authenticated() is False
    assert sessions.time_until_expiry() == timedelta(0)


def test_separate_keys_hold_separate_sessions(store, directory, clock):
    a = SessionManager(store, directory, key="user_auth_session:a", clock=clock)
    b = SessionManager(store, directory, key="user_auth_session:b", clock=clock)

    a.login("employee1@store.com", "1234")

    assert a.is_authenticated() is True
    assert b.is_authenticated() is False


def test_session_blob_with_utc_offset_means_logged_out(directory, clock):
    blob = {
        "token": "t",
        "user": {"id": "1", "name": "Kim Employee", "email": "employee1@store.com", "role": "employee"},
        "loginTime": "2024-01-10T09:00:00+00:00",
        "expiryTime": "2024-01-10T17:00:00+00:00",
    }
    sessions = SessionManager(MemoryKeyValueStore({SESSION_KEY: json.dumps(blob)}), directory, clock=clock)

    assert sessions.is_authenticated() is False
    assert sessions.current_user() is None
    assert sessions.time_until_expiry() == timedelta(0)
