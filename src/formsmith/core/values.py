"""Normalisation of raw attribute values before translation and escaping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


AttributeValue = str | bytes | bool | int | float | None


class ValueKind(Enum):
    """Variants an attribute value can take."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    BYTES = "bytes"


@dataclass(frozen=True, slots=True)
class BooleanAttribute:
    """Tokens rendered for an attribute toggled by a boolean value."""

    on: str
    off: str

    def resolve(self, value: AttributeValue) -> str:
        """Map ``value`` to the on/off token, keeping values already equal to one."""
        if not isinstance(value, bool) and value in (self.on, self.off):
            return value
        return self.on if value else self.off


BOOLEAN_ATTRIBUTES: dict[str, BooleanAttribute] = {
    "autocomplete": BooleanAttribute(on="on", off="off"),
    "autofocus": BooleanAttribute(on="autofocus", off=""),
    "checked": BooleanAttribute(on="checked", off=""),
    "disabled": BooleanAttribute(on="disabled", off=""),
    "multiple": BooleanAttribute(on="multiple", off=""),
    "readonly": BooleanAttribute(on="readonly", off=""),
    "required": BooleanAttribute(on="required", off=""),
    "selected": BooleanAttribute(on="selected", off=""),
}


def classify(value: AttributeValue) -> ValueKind:
    """Return the variant ``value`` belongs to."""
    if value is None:
        return ValueKind.NULL
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int | float):
        return ValueKind.NUMBER
    if isinstance(value, bytes):
        return ValueKind.BYTES
    return ValueKind.STRING


def stringify(value: AttributeValue) -> str | bytes | None:
    """Convert ``value`` to the text handed to the escaper.

    ``None`` stays ``None``; booleans become ``"1"`` or ``""``; numbers use
    their decimal representation; bytes are left for the escaper to decode.
    """
    kind = classify(value)
    if kind is ValueKind.NULL:
        return None
    if kind is ValueKind.BOOLEAN:
        return "1" if value else ""
    if kind is ValueKind.BYTES:
        return value
    return str(value)


__all__ = [
    "BOOLEAN_ATTRIBUTES",
    "AttributeValue",
    "BooleanAttribute",
    "ValueKind",
    "classify",
    "stringify",
]
