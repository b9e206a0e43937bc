"""Helper rendering ``<input>`` elements."""

from __future__ import annotations

from typing import ClassVar

from formsmith.core.element import Element
from formsmith.core.exceptions import DomainError

from .base import AbstractHelper


class FormInput(AbstractHelper):
    """Render an ``<input>`` tag from an :class:`Element`."""

    tag_attributes: ClassVar[tuple[str, ...]] = (
        "name",
        "type",
        "accept",
        "alt",
        "autocomplete",
        "autofocus",
        "checked",
        "dirname",
        "disabled",
        "form",
        "formaction",
        "formenctype",
        "formmethod",
        "formnovalidate",
        "formtarget",
        "height",
        "list",
        "max",
        "maxlength",
        "min",
        "multiple",
        "pattern",
        "placeholder",
        "readonly",
        "required",
        "size",
        "src",
        "step",
        "value",
        "width",
    )

    def __call__(self, element: Element | None = None) -> str | FormInput:
        if element is None:
            return self
        return self.render(element)

    def render(self, element: Element) -> str:
        """Return the markup for ``element``.

        Raises :class:`DomainError` when the element has no name, since an
        unnamed input would never be submitted.
        """
        name = element.name
        if not name:
            raise DomainError(
                f"{type(self).__name__} requires that the element has an assigned name; "
                "none discovered"
            )

        attributes = {"name": name, **element.attributes}
        attributes["type"] = self.get_type(element)
        attributes["value"] = element.value
        return f"<input {self.create_attributes_string(attributes)}{self.get_inline_closing_bracket()}"

    def get_type(self, element: Element) -> str:
        """Return the ``type`` attribute, defaulting to ``text``."""
        return element.get_attribute("type") or "text"


__all__ = ["FormInput"]
