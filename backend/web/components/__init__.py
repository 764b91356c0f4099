# Portal Component System
# Pure Python components for HTML generation

from .base import Component
from .layout import Layout
from .navigation import Navigation, nav_items_for, PAGE_TITLES
from .cards import NotificationCard, IdentityRow
from .forms import (
    FormField,
    TextAreaField,
    TextInputField,
    SelectField,
    SubmitButton,
    LoginForm,
    RegisterForm,
    NotificationForm,
)

__all__ = [
    "Component",
    "Layout",
    "Navigation",
    "nav_items_for",
    "PAGE_TITLES",
    "NotificationCard",
    "IdentityRow",
    "FormField",
    "TextAreaField",
    "TextInputField",
    "SelectField",
    "SubmitButton",
    "LoginForm",
    "RegisterForm",
    "NotificationForm",
]
