"""Admin panel: user directory, system statistics and broadcast form."""

from typing import Sequence

from identity_access.domain import Identity, NotificationTarget

from ..base import Component
from ..cards import IdentityRow
from ..forms import NotificationForm


class AdminPage(Component):
    def __init__(
        self,
        identities: Sequence[Identity],
        *,
        notification_count: int,
        targets: Sequence[NotificationTarget],
    ):
        self.identities = list(identities)
        self.notification_count = notification_count
        self.targets = targets

    def render(self) -> str:
        if self.identities:
            rows = "".join(IdentityRow(i).render() for i in self.identities)
            directory_html = f'<ul class="identity-list">{rows}</ul>'
        else:
            directory_html = '<p class="text-muted">No users registered.</p>'
        return f"""
        <section class="card" aria-labelledby="users-title">
            <h2 id="users-title">All Registered Users</h2>
            {directory_html}
            <p><a href="/admin" class="btn btn-secondary">Refresh User List</a></p>
        </section>
        <section class="card" aria-labelledby="stats-title">
            <h2 id="stats-title">System Statistics</h2>
            <dl class="stats">
                <div class="stat-row"><dt>Total Users</dt><dd class="stat-total-users">{len(self.identities)}</dd></div>
                <div class="stat-row"><dt>Notifications Sent</dt><dd class="stat-notifications">{self.notification_count}</dd></div>
            </dl>
        </section>
        {NotificationForm(self.targets).render()}"""
