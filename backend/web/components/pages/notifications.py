"""Notification inbox for students: role-filtered, newest first."""

from datetime import datetime
from typing import Optional, Sequence

from identity_access.domain import Notification

from ..base import Component
from ..cards import NotificationCard


class NotificationsPage(Component):
    def __init__(self, notifications: Sequence[Notification], *, now: Optional[datetime] = None):
        self.notifications = list(notifications)
        self.now = now

    def render(self) -> str:
        if not self.notifications:
            return """
        <section class="empty-state">
            <h2>Your Notifications</h2>
            <p class="empty-title">No new notifications</p>
            <p class="text-muted">Check back later for updates!</p>
        </section>"""
        cards = "".join(NotificationCard(n, now=self.now).render() for n in self.notifications)
        return f"""
        <section aria-labelledby="inbox-title">
            <h2 id="inbox-title">Your Notifications</h2>
            <ul class="notification-list">{cards}</ul>
        </section>"""
