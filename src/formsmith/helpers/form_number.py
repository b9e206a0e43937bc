"""Helper rendering ``<input type="number">`` elements."""

from __future__ import annotations

from typing import ClassVar

from formsmith.core.element import Element

from .form_input import FormInput


class FormNumber(FormInput):
    """Render a number input whatever ``type`` the element declares."""

    tag_attributes: ClassVar[tuple[str, ...]] = (
        "name",
        "type",
        "autocomplete",
        "autofocus",
        "disabled",
        "form",
        "list",
        "max",
        "min",
        "step",
        "placeholder",
        "readonly",
        "required",
        "value",
    )

    def get_type(self, element: Element) -> str:
        return "number"


__all__ = ["FormNumber"]
