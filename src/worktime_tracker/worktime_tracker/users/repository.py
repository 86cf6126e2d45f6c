from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def list_active(self) -> Sequence[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        user_id: str,
        full_name: str,
        email: str,
        password_hash: str,
        is_password_temp: bool,
        hourly_wage: float,
    ) -> str:
        raise NotImplementedError

    def set_active(self, user_id: str, *, is_active: bool) -> bool:
        raise NotImplementedError
