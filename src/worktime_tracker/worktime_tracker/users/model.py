from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a directory user.

    Plain data object; no storage access here.
    """

    user_id: str
    full_name: str
    email: str
    password_hash: str
    is_active: bool = True
    is_password_temp: bool = False
    hourly_wage: float = 0.0


@dataclass(frozen=True)
class PublicUser:
    """What the session exposes about the logged-in user."""

    id: str
    name: str
    email: str
    role: Role = Role.EMPLOYEE

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email, "role": self.role.value}

    @classmethod
    def from_dict(cls, data: dict) -> "PublicUser":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            email=str(data["email"]),
            role=Role(data.get("role", Role.EMPLOYEE.value)),
        )


@dataclass(frozen=True)
class LoginEnabledUser:
    """Quick-login listing entry."""

    email: str
    name: str
    has_temp_password: bool
