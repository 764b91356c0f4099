"""Profile page: the signed-in account's directory entry."""

from identity_access.directory import avatar_initial
from identity_access.domain import Identity

from ..base import Component


class ProfilePage(Component):
    def __init__(self, user: Identity):
        self.user = user

    def render(self) -> str:
        u = self.user
        rows = [("UID", u.uid), ("Role", u.role.label), ("Account Status", "Active")]
        if u.phone_number:
            rows.append(("Phone Number", u.phone_number))
        rows_html = "".join(
            f'<div class="profile-row"><dt>{self.escape(label)}</dt><dd>{self.escape(value)}</dd></div>'
            for label, value in rows
        )
        phone_html = f'<p class="text-muted">{self.escape(u.phone_number)}</p>' if u.phone_number else ""
        return f"""
        <section class="card profile">
            <span class="avatar avatar-large" aria-hidden="true">{self.escape(avatar_initial(u))}</span>
            <h2>{self.escape(u.display_name)}</h2>
            <p class="text-muted">{self.escape(u.email)}</p>
            {phone_html}
            <dl class="profile-details">{rows_html}</dl>
        </section>"""
