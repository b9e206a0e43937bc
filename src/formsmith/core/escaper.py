"""Context-specific escaping for HTML attribute values."""

from __future__ import annotations

import re

from markupsafe import escape

from .config import DEFAULT_ENCODING, normalize_encoding
from .exceptions import EscaperError


_UNSAFE_ATTR_CHAR = re.compile(r"[^a-zA-Z0-9,._-]")

_NAMED_ENTITIES = {
    0x22: "quot",
    0x26: "amp",
    0x3C: "lt",
    0x3E: "gt",
}

_ALLOWED_CONTROLS = frozenset({"\t", "\n", "\r"})


def _attr_replacement(match: re.Match[str]) -> str:
    char = match.group(0)
    codepoint = ord(char)
    if (codepoint <= 0x1F and char not in _ALLOWED_CONTROLS) or 0x7F <= codepoint <= 0x9F:
        return "&#xFFFD;"
    named = _NAMED_ENTITIES.get(codepoint)
    if named is not None:
        return f"&{named};"
    if codepoint > 0xFF:
        return f"&#x{codepoint:04X};"
    return f"&#x{codepoint:02X};"


class Escaper:
    """Escape values for inclusion in double-quoted HTML attributes.

    Every character outside ``[A-Za-z0-9,._-]`` becomes a character reference,
    so the result cannot terminate the attribute in quoted or unquoted
    contexts. Byte input is decoded with the configured encoding and text
    input must be representable in it; anything else raises
    :class:`EscaperError`.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        try:
            self._encoding = normalize_encoding(encoding)
        except ValueError as exc:
            raise EscaperError(str(exc)) from exc

    @property
    def encoding(self) -> str:
        return self._encoding

    def _to_text(self, value: str | bytes) -> str:
        try:
            if isinstance(value, bytes):
                return value.decode(self._encoding)
            value.encode(self._encoding)
        except UnicodeError as exc:
            raise EscaperError(
                f"Value is not valid {self._encoding} or could not be converted."
            ) from exc
        return value

    def escape_html_attr(self, value: str | bytes) -> str:
        """Return ``value`` escaped for a double-quoted attribute."""
        text = self._to_text(value)
        if not text or (text.isdigit() and text.isascii()):
            return text
        return _UNSAFE_ATTR_CHAR.sub(_attr_replacement, text)

    def escape_html(self, value: str) -> str:
        """Return ``value`` escaped for HTML text content."""
        return str(escape(value))


__all__ = ["Escaper"]
