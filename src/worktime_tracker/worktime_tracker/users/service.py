from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.exceptions import ValidationError
from .model import LoginEnabledUser, User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserDirectory:
    """Use case: look up and verify employees."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user when the password matches, inactive accounts included.

        The caller decides how to treat ``is_active``.
        """
        user = self._users.get_by_email((email or "").strip().lower())
        if not user or not user.password_hash:
            return None

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        return user if ok else None

    def list_login_enabled_users(self) -> Sequence[LoginEnabledUser]:
        return [
            LoginEnabledUser(email=u.email, name=u.full_name, has_temp_password=u.is_password_temp)
            for u in self._users.list_active()
        ]

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get_by_id(user_id)

    def create_user(
        self,
        *,
        full_name: str,
        email: str,
        password: str,
        hourly_wage: float = 0.0,
        is_password_temp: bool = False,
    ) -> str:
        full_name = require_non_empty(full_name, "Full name")
        email = require_non_empty(email, "Email").lower()
        require_min_length(password, "Password", 4)

        if "@" not in email:
            raise ValidationError("Email is not valid")
        if self._users.get_by_email(email):
            raise ValidationError("Email is already registered")
        if hourly_wage < 0:
            raise ValidationError("Hourly wage cannot be negative")

        user_id = uuid.uuid4().hex
        self._users.create_user(
            user_id=user_id,
            full_name=full_name,
            email=email,
            password_hash=generate_password_hash(password),
            is_password_temp=is_password_temp,
            hourly_wage=hourly_wage,
        )
        logger.info("Created user %s (%s)", user_id, email)
        return user_id

    def deactivate(self, user_id: str) -> None:
        if not self._users.set_active(user_id, is_active=False):
            raise ValidationError("User not found")
