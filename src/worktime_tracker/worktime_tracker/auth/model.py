from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..users.model import PublicUser


@dataclass(frozen=True)
class Session:
    """Time-boxed proof of login for one user."""

    token: str
    user: PublicUser
    login_time: datetime
    expiry_time: datetime

    def is_valid_at(self, now: datetime) -> bool:
        return now <= self.expiry_time

    def to_dict(self) -> dict:
        return {
            "token": self.token,
            "user": self.user.to_dict(),
            "loginTime": self.login_time.isoformat(),
            "expiryTime": self.expiry_time.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        login_time = datetime.fromisoformat(data["loginTime"])
        expiry_time = datetime.fromisoformat(data["expiryTime"])
        # Session times are naive local time, like the clock they are compared with.
        if login_time.tzinfo is not None or expiry_time.tzinfo is not None:
            raise ValueError("Session timestamps must not carry a UTC offset")
        return cls(
            token=str(data["token"]),
            user=PublicUser.from_dict(data["user"]),
            login_time=login_time,
            expiry_time=expiry_time,
        )


@dataclass(frozen=True)
class LoginResult:
    success: bool
    user: Optional[PublicUser] = None
    error: Optional[str] = None
