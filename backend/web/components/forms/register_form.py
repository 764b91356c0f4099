"""
Registration form.

Only self-selectable roles are offered; admin accounts are never created
through this form.
"""
from typing import Optional

from identity_access.domain import USER_SELECTABLE_ROLES, Role

from ..base import Component
from .fields import SelectField, TextInputField
from .submit import SubmitButton


class RegisterForm(Component):
    def __init__(self, error: Optional[str] = None, values: Optional[dict] = None):
        self.error = error
        self.values = values or {}

    def render(self) -> str:
        fields = [
            (TextInputField("name", "Full Name", required=True), "text", "name"),
            (TextInputField("email", "Email", required=True), "email", "email"),
            (TextInputField("password", "Password", required=True, help_text="At least 6 characters."), "password", "new-password"),
            (TextInputField("phone", "Phone Number", required=True), "tel", "tel"),
        ]
        rendered = [
            field.render(
                value=self.values.get(field.field_id, ""),
                input_type=input_type,
                autocomplete=autocomplete,
                class_="form-input",
            )
            for field, input_type, autocomplete in fields
        ]
        role_html = SelectField("role", "Role", required=True).render(
            [(r.value, r.label) for r in USER_SELECTABLE_ROLES],
            selected=self.values.get("role") or Role.STUDENT.value,
            class_="form-input",
        )
        error_html = (
            f'<div class="form-error" role="alert">{self.escape(self.error)}</div>' if self.error else ""
        )
        return f"""
        <section class="auth-card" aria-labelledby="register-title">
            <h1 id="register-title">Create Account</h1>
            <form method="post" action="/auth/register" class="register-form">
                {''.join(rendered)}
                {role_html}
                {error_html}
                <div class="form-actions">
                    {SubmitButton("Register").render()}
                </div>
            </form>
            <p class="auth-switch"><a href="/login">Already registered? Log in.</a></p>
        </section>"""
