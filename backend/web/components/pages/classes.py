"""Teacher class management page with the send-notification form."""

from typing import Sequence

from identity_access.domain import NotificationTarget

from ..base import Component
from ..forms import NotificationForm

CLASSES = (
    ("Introduction to Programming", 32),
    ("Calculus I", 28),
)
TASKS = (
    ("Grade Programming Assignments", "Due: End of week"),
    ("Respond to student emails", "5 unread"),
)


class ClassesPage(Component):
    def __init__(self, targets: Sequence[NotificationTarget]):
        self.targets = targets

    def render(self) -> str:
        classes = "".join(
            f'<li class="card class-item"><strong>{self.escape(name)}</strong>'
            f'<span class="text-muted"> {count} Students</span></li>'
            for name, count in CLASSES
        )
        tasks = "".join(
            f'<li class="card task-item"><strong>{self.escape(title)}</strong>'
            f'<span class="text-muted"> {self.escape(detail)}</span></li>'
            for title, detail in TASKS
        )
        return f"""
        <section aria-labelledby="classes-title">
            <h2 id="classes-title">Your Classes</h2>
            <ul class="class-list">{classes}</ul>
        </section>
        <section aria-labelledby="tasks-title">
            <h2 id="tasks-title">Pending Tasks</h2>
            <ul class="task-list">{tasks}</ul>
        </section>
        {NotificationForm(self.targets).render()}"""
