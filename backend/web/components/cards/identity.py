"""
IdentityRow component: one account in the admin user directory.
"""

from urllib.parse import quote

from identity_access.directory import avatar_initial, display_name_of
from identity_access.domain import Identity

from ..base import Component
from ..forms.submit import SubmitButton


class IdentityRow(Component):
    def __init__(self, identity: Identity, *, deletable: bool = True):
        self.identity = identity
        self.deletable = deletable

    def render(self) -> str:
        i = self.identity
        name = display_name_of(i)
        subtitle = f"{i.email} ({i.role.value})"
        if i.phone_number:
            subtitle += f" / {i.phone_number}"
        delete_html = ""
        if self.deletable:
            button = SubmitButton(
                "Delete",
                variant="danger",
                confirm=f'Are you sure you want to delete user "{name}" ({i.email})? This action cannot be undone.',
            ).render()
            delete_html = (
                f'<form method="post" action="/admin/users/{quote(i.email, safe="")}/delete" class="inline-form">'
                f"{button}</form>"
            )
        return f"""
        <li class="identity-row" data-uid="{self.escape(i.uid)}">
            <span class="avatar" aria-hidden="true">{self.escape(avatar_initial(i))}</span>
            <div class="identity-text">
                <div class="identity-name">{self.escape(name)}</div>
                <div class="identity-subtitle text-muted">{self.escape(subtitle)}</div>
            </div>
            {delete_html}
        </li>"""
