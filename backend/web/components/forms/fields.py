"""
Form field components.

Every control is wrapped the same way (label, control, help, error) so the
login, registration and notification forms share one markup shape.
"""

from typing import Any, Dict, Optional, Sequence, Tuple

from ..base import Component


class FormField(Component):
    """Label + control + optional help/error text for one named field."""

    def __init__(
        self,
        field_id: str,
        label: str,
        *,
        required: bool = False,
        help_text: Optional[str] = None,
        error_text: Optional[str] = None,
    ) -> None:
        self.field_id = field_id
        self.label = label
        self.required = required
        self.help_text = help_text
        self.error_text = error_text

    def control_attrs(self, **extra: Any) -> str:
        """Attributes shared by every control: id/name, ARIA wiring, extras."""
        described = [
            f"{self.field_id}-{suffix}"
            for suffix, text in (("help", self.help_text), ("error", self.error_text))
            if text
        ]
        base: Dict[str, Any] = {
            "id": self.field_id,
            "name": self.field_id,
            "required": self.required,
            "aria_describedby": " ".join(described) or None,
            "aria_invalid": "true" if self.error_text else None,
        }
        base.update(extra)
        return self.attributes(**base)

    def render(self, control_html: str) -> str:
        marker = '<span class="form-required" aria-hidden="true">*</span>' if self.required else ""
        parts = [
            f'<label {self.attributes(for_=self.field_id, class_="form-label")}>{self.escape(self.label)}{marker}</label>',
            control_html,
        ]
        if self.help_text:
            parts.append(f'<p class="form-help" id="{self.field_id}-help">{self.escape(self.help_text)}</p>')
        if self.error_text:
            parts.append(
                f'<p class="form-error" role="alert" id="{self.field_id}-error">{self.escape(self.error_text)}</p>'
            )
        return f'<div class="form-field">{"".join(parts)}</div>'


class TextAreaField(FormField):
    def render(self, value: str = "", rows: int = 4, **attrs: Any) -> str:
        control = f"<textarea {self.control_attrs(rows=str(rows), **attrs)}>{self.escape(value)}</textarea>"
        return super().render(control)


class TextInputField(FormField):
    """Single-line input; `input_type` is one of text, email, password, tel."""

    def render(
        self,
        *,
        value: str = "",
        input_type: str = "text",
        autocomplete: Optional[str] = None,
        placeholder: Optional[str] = None,
        **attrs: Any,
    ) -> str:
        control = "<input {}>".format(
            self.control_attrs(
                type=input_type,
                # Passwords are never echoed back into the page.
                value=None if input_type == "password" else value,
                autocomplete=autocomplete,
                placeholder=placeholder,
                **attrs,
            )
        )
        return super().render(control)


class SelectField(FormField):
    """Dropdown built from (value, label) pairs."""

    def render(self, options: Sequence[Tuple[str, str]], *, selected: Optional[str] = None, **attrs: Any) -> str:
        opts = "".join(
            f"<option {self.attributes(value=value, selected=(value == selected))}>{self.escape(label)}</option>"
            for value, label in options
        )
        return super().render(f"<select {self.control_attrs(**attrs)}>{opts}</select>")
