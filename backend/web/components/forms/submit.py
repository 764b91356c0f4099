"""
Submit button component.

Keeps handling of loading labels and disabled state consistent.
"""

from typing import Optional

from ..base import Component


class SubmitButton(Component):
    """Form action button; `variant` selects primary, secondary or danger styling."""

    def __init__(
        self,
        label: str,
        *,
        variant: str = "primary",
        disabled: bool = False,
        data_action: Optional[str] = None,
        confirm: Optional[str] = None,
    ) -> None:
        self.label = label
        self.variant = variant
        self.disabled = disabled
        self.data_action = data_action
        self.confirm = confirm

    def render(self) -> str:
        attrs = self.attributes(
            type="submit",
            class_=f"btn btn-{self.variant}",
            disabled=self.disabled,
            data_action=self.data_action,
            onclick=f"return confirm({self.confirm!r});" if self.confirm else None,
        )
        return f"<button {attrs}>{self.escape(self.label)}</button>"
