"""
Send-notification form used on the teacher and admin pages.

The offered audiences depend on the sender's role; the route re-checks the
chosen target against the same list.
"""
from typing import Sequence

from identity_access.domain import NotificationTarget

from ..base import Component
from .fields import SelectField, TextAreaField
from .submit import SubmitButton


class NotificationForm(Component):
    def __init__(self, targets: Sequence[NotificationTarget], *, message: str = ""):
        self.targets = list(targets)
        self.message = message

    def render(self) -> str:
        message_html = TextAreaField("message", "Message", required=True).render(
            value=self.message,
            rows=4,
            placeholder="Enter your notification message here...",
            class_="form-input",
        )
        target_html = SelectField("target", "Target Audience", required=True).render(
            [(t.value, t.label) for t in self.targets],
            selected=self.targets[0].value if self.targets else None,
            class_="form-input",
        )
        return f"""
        <section class="card notification-compose" aria-labelledby="compose-title">
            <h2 id="compose-title">Send New Notification</h2>
            <form method="post" action="/notifications/send" class="notification-form">
                {message_html}
                {target_html}
                <div class="form-actions">
                    {SubmitButton("Send").render()}
                </div>
            </form>
        </section>"""
