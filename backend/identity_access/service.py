"""
Session & directory store: registered identities, the active session and the
broadcast notification log.

Why:
    The presentation layer needs one place that owns who is registered, who is
    signed in and which notifications exist. It calls into this store and
    re-renders from the returned values or from change callbacks.

Behavior:
    - Fallible operations return a `Result`; expected failures never raise.
    - "Async" operations wait a fixed simulated latency, then apply their
      effect. Both happen under one lock, so no other caller mutates the store
      while a delay is pending. The work is shielded from cancellation of the
      awaiting caller: once started, an operation always applies its effect.
    - Observers run synchronously after each successful mutation.

Security:
    This is a demonstration store. `sign_in` does not verify passwords and the
    federated path has no failure mode. Do not infer an authentication scheme.
"""
from __future__ import annotations

import asyncio
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Tuple, TypeVar

from identity_access.domain import (
    FEDERATED_DISPLAY_NAME,
    FEDERATED_EMAIL,
    FEDERATED_UID,
    MIN_PASSWORD_LENGTH,
    Identity,
    Notification,
    NotificationTarget,
    Role,
)
from identity_access.results import AuthError, Result
from identity_access.stores import DirectoryBackend, InMemoryDirectoryBackend

logger = logging.getLogger("edtech.identity_access")

T = TypeVar("T")
Observer = Callable[["AuthService"], None]


@dataclass(frozen=True)
class SimulatedLatency:
    """Fixed delays (seconds) applied before each async operation takes effect."""

    register: float = 0.5
    sign_in: float = 0.5
    sign_in_federated: float = 0.5
    sign_out: float = 0.3
    broadcast: float = 0.4

    @classmethod
    def none(cls) -> "SimulatedLatency":
        return cls(0.0, 0.0, 0.0, 0.0, 0.0)

    def scaled(self, factor: float) -> "SimulatedLatency":
        if not math.isfinite(factor) or factor < 0:
            raise ValueError("latency_scale_invalid")
        return SimulatedLatency(
            register=self.register * factor,
            sign_in=self.sign_in * factor,
            sign_in_federated=self.sign_in_federated * factor,
            sign_out=self.sign_out * factor,
            broadcast=self.broadcast * factor,
        )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _email_domain(email: str) -> str:
    # Log only the domain part of an email address.
    return email.rsplit("@", 1)[-1] if "@" in email else "?"


class AuthService:
    def __init__(
        self,
        *,
        backend: Optional[DirectoryBackend] = None,
        latency: Optional[SimulatedLatency] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._directory: DirectoryBackend = backend if backend is not None else InMemoryDirectoryBackend()
        self._latency = latency if latency is not None else SimulatedLatency()
        self._clock = clock
        self._current: Optional[Identity] = None
        self._notifications: List[Notification] = []
        self._next_uid = 1
        self._next_notification_id = 1
        self._observers: List[Observer] = []
        self._lock = asyncio.Lock()

    # --- Read access -----------------------------------------------------------

    @property
    def current_identity(self) -> Optional[Identity]:
        return self._current

    @property
    def notifications(self) -> Tuple[Notification, ...]:
        """The full notification log, newest first."""
        return tuple(self._notifications)

    @property
    def latency(self) -> SimulatedLatency:
        return self._latency

    def list_all(self) -> List[Identity]:
        return self._directory.load_all()

    def get(self, email: str) -> Optional[Identity]:
        return self._directory.get(email)

    def notifications_for(self, identity: Identity) -> List[Notification]:
        return [n for n in self._notifications if n.target.includes(identity.role)]

    # --- Observers -------------------------------------------------------------

    def subscribe(self, callback: Observer) -> Callable[[], None]:
        """Register a change callback; returns a function that removes it again."""
        self._observers.append(callback)

        def _unsubscribe() -> None:
            try:
                self._observers.remove(callback)
            except ValueError:
                pass

        return _unsubscribe

    def _notify(self) -> None:
        for callback in list(self._observers):
            try:
                callback(self)
            except Exception:
                logger.exception("observer failed: %r", callback)

    # --- Mutations -------------------------------------------------------------

    async def register(
        self,
        email: str,
        password: str,
        display_name: str,
        role: object,
        phone_number: Optional[str] = None,
    ) -> Result[Identity]:
        def apply() -> Result[Identity]:
            if self._directory.get(email) is not None:
                return self._fail("register", email, AuthError.DUPLICATE_EMAIL)
            if len(password) < MIN_PASSWORD_LENGTH:
                return self._fail("register", email, AuthError.WEAK_PASSWORD)
            parsed = Role.parse(role)
            if parsed is None:
                return self._fail("register", email, AuthError.INVALID_ROLE)
            identity = Identity(
                uid=f"mock-uid-{self._next_uid}",
                email=email,
                display_name=display_name,
                role=parsed,
                phone_number=phone_number,
            )
            self._next_uid += 1
            self._directory.upsert(identity)
            self._current = identity
            logger.info("registered %s (%s) at %s", identity.uid, parsed.value, _email_domain(email))
            self._notify()
            return Result.success(identity)

        return await self._perform(self._latency.register, apply)

    async def sign_in(self, email: str, password: str) -> Result[Identity]:
        # Demonstration behavior: the password is accepted as-is.
        def apply() -> Result[Identity]:
            identity = self._directory.get(email)
            if identity is None:
                return self._fail("sign_in", email, AuthError.UNKNOWN_EMAIL)
            self._current = identity
            logger.info("signed in %s", identity.uid)
            self._notify()
            return Result.success(identity)

        return await self._perform(self._latency.sign_in, apply)

    async def sign_in_federated(self, default_role: object = Role.STUDENT) -> Result[Identity]:
        role = Role.parse(default_role)
        if role is None:
            raise ValueError(f"invalid role: {default_role!r}")

        def apply() -> Result[Identity]:
            identity = self._directory.get(FEDERATED_EMAIL)
            if identity is None:
                identity = Identity(
                    uid=FEDERATED_UID,
                    email=FEDERATED_EMAIL,
                    display_name=FEDERATED_DISPLAY_NAME,
                    role=role,
                    phone_number=None,
                )
                self._directory.upsert(identity)
                logger.info("created federated identity with role %s", role.value)
            self._current = identity
            logger.info("signed in %s via federated stub", identity.uid)
            self._notify()
            return Result.success(identity)

        return await self._perform(self._latency.sign_in_federated, apply)

    async def sign_out(self) -> None:
        def apply() -> None:
            previous = self._current
            self._current = None
            if previous is not None:
                logger.info("signed out %s", previous.uid)
            self._notify()

        await self._perform(self._latency.sign_out, apply)

    async def delete_by_email(self, email: str) -> None:
        def apply() -> None:
            removed = self._directory.delete(email)
            if removed is not None:
                logger.info("deleted %s", removed.uid)
                if self._current is not None and self._current.email == email:
                    self._current = None
            self._notify()

        await self._perform(0.0, apply)

    async def broadcast_notification(self, sender_name: str, message: str, target: object) -> Notification:
        audience = NotificationTarget.coerce(target)

        def apply() -> Notification:
            notification = Notification(
                id=f"n-{self._next_notification_id}",
                sender_name=sender_name,
                message=message,
                timestamp=self._clock(),
                target=audience,
            )
            self._next_notification_id += 1
            self._notifications.insert(0, notification)
            logger.info("broadcast %s to %s", notification.id, audience.value)
            self._notify()
            return notification

        return await self._perform(self._latency.broadcast, apply)

    def preload(
        self,
        identities: Iterable[Identity] = (),
        notifications: Iterable[Notification] = (),
        *,
        next_uid: Optional[int] = None,
        next_notification_id: Optional[int] = None,
    ) -> None:
        """Install existing records without notifying observers or opening a session.

        `notifications` must be given newest first; they are appended after any
        notifications already in the log.
        """
        for identity in identities:
            self._directory.upsert(identity)
        self._notifications.extend(notifications)
        if next_uid is not None:
            self._next_uid = max(self._next_uid, next_uid)
        if next_notification_id is not None:
            self._next_notification_id = max(self._next_notification_id, next_notification_id)

    # --- Internals -------------------------------------------------------------

    def _fail(self, operation: str, email: str, error: AuthError) -> Result:
        logger.warning("%s failed at %s: %s", operation, _email_domain(email), error.code)
        return Result.failure(error)

    async def _perform(self, delay: float, apply: Callable[[], T]) -> T:
        return await asyncio.shield(self._serialized(delay, apply))

    async def _serialized(self, delay: float, apply: Callable[[], T]) -> T:
        async with self._lock:
            if delay > 0:
                await asyncio.sleep(delay)
            return apply()


__all__ = ["AuthService", "SimulatedLatency"]
