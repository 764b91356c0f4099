"""Demo accounts and notifications for local runs of the portal."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from identity_access.domain import Identity, Notification, NotificationTarget, Role
from identity_access.service import AuthService

DEMO_IDENTITIES = (
    Identity(
        uid="mock-uid-1",
        email="test@example.com",
        display_name="Test Student",
        role=Role.STUDENT,
        phone_number="111-222-3333",
    ),
    Identity(
        uid="mock-uid-2",
        email="teacher@example.com",
        display_name="Teacher Name",
        role=Role.TEACHER,
        phone_number="444-555-6666",
    ),
    Identity(
        uid="mock-uid-3",
        email="admin@example.com",
        display_name="Admin",
        role=Role.ADMIN,
        phone_number="777-888-9999",
    ),
)


def demo_notifications(now: datetime) -> list[Notification]:
    """Three welcome notifications aged relative to `now`, newest first."""
    return [
        Notification(
            id="n-3",
            sender_name="EdTech Team",
            message="System maintenance scheduled for Saturday. Services may be briefly interrupted.",
            timestamp=now - timedelta(hours=2),
            target=NotificationTarget.ALL,
        ),
        Notification(
            id="n-2",
            sender_name="Prof. Johnson",
            message="New assignment posted for Calculus I. Due next week!",
            timestamp=now - timedelta(hours=10),
            target=NotificationTarget.STUDENT,
        ),
        Notification(
            id="n-1",
            sender_name="Admin",
            message="Welcome to the EdTech platform! Explore your dashboard.",
            timestamp=now - timedelta(days=2),
            target=NotificationTarget.ALL,
        ),
    ]


def seed_demo_data(service: AuthService, *, now: Optional[datetime] = None) -> None:
    """Install the demo directory and notification log; later ids continue at 4."""
    ts = now or datetime.now(timezone.utc)
    service.preload(
        DEMO_IDENTITIES,
        demo_notifications(ts),
        next_uid=len(DEMO_IDENTITIES) + 1,
        next_notification_id=4,
    )


__all__ = ["DEMO_IDENTITIES", "demo_notifications", "seed_demo_data"]
