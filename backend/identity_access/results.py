"""
Expected failures of the identity store and the result wrapper that carries them.

Why: Registration and sign-in failures are part of normal use (typos, a
reused email) and must be reported to the user, not raised. Every fallible
store operation returns a `Result` holding either the value or one `AuthError`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class AuthError(Enum):
    DUPLICATE_EMAIL = ("duplicate_email", "Email already registered.")
    WEAK_PASSWORD = ("weak_password", "Password should be at least 6 characters.")
    INVALID_ROLE = ("invalid_role", "Invalid role specified.")
    UNKNOWN_EMAIL = ("unknown_email", "No user found for that email.")

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[AuthError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AuthError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise when the result is a failure (tests, scripts)."""
        if self.error is not None:
            raise ValueError(self.error.code)
        return self.value  # type: ignore[return-value]


__all__ = ["AuthError", "Result"]
