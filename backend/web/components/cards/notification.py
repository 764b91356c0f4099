"""
NotificationCard component.

One broadcast message with its sender and relative age, as listed on the
student notifications page.
"""

from datetime import datetime
from typing import Optional

from identity_access.directory import format_relative_time
from identity_access.domain import Notification

from ..base import Component


class NotificationCard(Component):
    def __init__(self, notification: Notification, *, now: Optional[datetime] = None):
        self.notification = notification
        self.now = now

    def render(self) -> str:
        n = self.notification
        age = format_relative_time(n.timestamp, self.now)
        return f"""
        <li class="card notification-card" id="notification-{self.escape(n.id)}" data-target="{self.escape(n.target.value)}">
            <span class="notification-icon" aria-hidden="true">🔔</span>
            <div class="notification-body">
                <p class="notification-message">{self.escape(n.message)}</p>
                <p class="notification-meta text-muted">{self.escape(n.sender_name)} • {self.escape(age)}</p>
            </div>
        </li>"""
