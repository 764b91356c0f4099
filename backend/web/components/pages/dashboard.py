"""Dashboard page shown to every signed-in account."""

from identity_access.domain import Identity

from ..base import Component

UPCOMING = (
    ("Team Meeting", "Tomorrow, 10:00 AM", "High"),
    ("Project Alpha Submission", "Next Friday", ""),
    ("New Course: Advanced AI", "Starts next month", ""),
)


class DashboardPage(Component):
    def __init__(self, user: Identity, *, unread_count: int = 0):
        self.user = user
        self.unread_count = unread_count

    def render(self) -> str:
        items = []
        for title, when, badge in UPCOMING:
            badge_html = f'<span class="chip">{self.escape(badge)}</span>' if badge else ""
            items.append(
                f'<li class="card upcoming-item"><strong>{self.escape(title)}</strong>'
                f'<span class="text-muted"> {self.escape(when)}</span>{badge_html}</li>'
            )
        return f"""
        <section class="card welcome" aria-labelledby="welcome-title">
            <h2 id="welcome-title">Welcome, {self.escape(self.user.display_name)}!</h2>
            <p class="welcome-role">Your role: {self.escape(self.user.role.label)}</p>
            <h3>Today's quick summary</h3>
            <p class="text-muted"><em>No new assignments due today. Keep up the great work!</em></p>
            <p class="unread">Notifications for you: {self.unread_count}</p>
        </section>
        <section aria-labelledby="upcoming-title">
            <h2 id="upcoming-title">Upcoming</h2>
            <ul class="upcoming-list">{''.join(items)}</ul>
        </section>"""
