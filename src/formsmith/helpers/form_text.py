"""Helper rendering ``<input type="text">`` elements."""

from __future__ import annotations

from typing import ClassVar

from formsmith.core.element import Element

from .form_input import FormInput


class FormText(FormInput):
    """Render a single-line text input."""

    tag_attributes: ClassVar[tuple[str, ...]] = (
        "name",
        "type",
        "autocomplete",
        "autofocus",
        "dirname",
        "disabled",
        "form",
        "list",
        "maxlength",
        "minlength",
        "pattern",
        "placeholder",
        "readonly",
        "required",
        "size",
        "value",
    )

    def get_type(self, element: Element) -> str:
        return "text"


__all__ = ["FormText"]
