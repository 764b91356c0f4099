"""
Login form: email/password sign-in plus the federated ("Sign in with Google") stub.
"""
from typing import Optional

from ..base import Component
from .fields import TextInputField
from .submit import SubmitButton


class LoginForm(Component):
    def __init__(self, email: str = "", error: Optional[str] = None):
        self.email = email
        self.error = error

    def render(self) -> str:
        email_html = TextInputField("email", "Email", required=True).render(
            value=self.email, input_type="email", autocomplete="username", class_="form-input"
        )
        password_html = TextInputField("password", "Password", required=True).render(
            input_type="password", autocomplete="current-password", class_="form-input"
        )
        error_html = (
            f'<div class="form-error" role="alert">{self.escape(self.error)}</div>' if self.error else ""
        )
        return f"""
        <section class="auth-card" aria-labelledby="login-title">
            <h1 id="login-title">Welcome back</h1>
            <form method="post" action="/auth/login" class="login-form">
                {email_html}
                {password_html}
                {error_html}
                <div class="form-actions">
                    {SubmitButton("Login").render()}
                </div>
            </form>
            <form method="post" action="/auth/federated" class="federated-form">
                {SubmitButton("Sign in with Google", variant="secondary").render()}
            </form>
            <p class="auth-switch"><a href="/register">Don't have an account? Register here.</a></p>
        </section>"""
