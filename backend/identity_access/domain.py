"""
Identity domain types: roles, notification targets, identities, notifications.

Why:
- Centralize allowed roles to avoid drift between the store and the web layer.
- Role is a closed enumeration; registration is the single validation point,
  every other call site trusts the enum.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Account roles."""

    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: object) -> Optional["Role"]:
        """Return the matching role or None for anything outside the set."""
        if isinstance(value, Role):
            return value
        try:
            return cls(str(value))
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return self.value[:1].upper() + self.value[1:]


class NotificationTarget(str, Enum):
    """Audience of a broadcast notification."""

    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"
    ALL = "all"

    @classmethod
    def coerce(cls, value: object) -> "NotificationTarget":
        """Accept an enum member or its string value; raise ValueError otherwise."""
        if isinstance(value, NotificationTarget):
            return value
        if isinstance(value, Role):
            return cls(value.value)
        return cls(str(value))

    @property
    def label(self) -> str:
        if self is NotificationTarget.ALL:
            return "All Users"
        return self.value[:1].upper() + self.value[1:] + "s"

    def includes(self, role: Role) -> bool:
        return self is NotificationTarget.ALL or self.value == role.value


# Keep roles minimal and explicit. Immutable to prevent accidental mutation.
ALLOWED_ROLES = frozenset(r.value for r in Role)

# Admin accounts are never offered on the self-service registration form.
USER_SELECTABLE_ROLES = tuple(r for r in Role if r is not Role.ADMIN)

MIN_PASSWORD_LENGTH = 6

# Federated sign-in stub: one fixed, well-known account.
FEDERATED_EMAIL = "google_mock_user@example.com"
FEDERATED_DISPLAY_NAME = "Google Mock User"
FEDERATED_UID = "mock-uid-google"


@dataclass(frozen=True)
class Identity:
    uid: str
    email: str
    display_name: str
    role: Role
    phone_number: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "uid": self.uid,
            "email": self.email,
            "display_name": self.display_name,
            "role": self.role.value,
            "phone_number": self.phone_number,
        }


@dataclass(frozen=True)
class Notification:
    id: str
    sender_name: str
    message: str
    timestamp: datetime
    target: NotificationTarget

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sender_name": self.sender_name,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "target": self.target.value,
        }


__all__ = [
    "ALLOWED_ROLES",
    "USER_SELECTABLE_ROLES",
    "MIN_PASSWORD_LENGTH",
    "FEDERATED_EMAIL",
    "FEDERATED_DISPLAY_NAME",
    "FEDERATED_UID",
    "Role",
    "NotificationTarget",
    "Identity",
    "Notification",
]
