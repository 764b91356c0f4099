"""
Form components for the portal.

Provides basic building blocks such as FormField and SubmitButton and the
concrete login, registration and notification forms.
"""

from .fields import FormField, TextAreaField, TextInputField, SelectField
from .submit import SubmitButton
from .login_form import LoginForm
from .register_form import RegisterForm
from .notification_form import NotificationForm

__all__ = [
    "FormField",
    "TextAreaField",
    "TextInputField",
    "SelectField",
    "SubmitButton",
    "LoginForm",
    "RegisterForm",
    "NotificationForm",
]
