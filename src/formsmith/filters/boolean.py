"""Coercion of human-supplied boolean-ish values."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from formsmith.core.exceptions import InvalidArgumentError


_BOOL_ADAPTER = TypeAdapter(bool)


class BooleanFilter:
    """Normalise values such as ``"yes"``, ``"0"`` or ``"off"`` to a strict bool.

    Strings are parsed with pydantic's lax boolean rules. When ``casting`` is
    enabled, strings that are not recognised fall back to Python truthiness;
    otherwise they raise :class:`InvalidArgumentError`.
    """

    def __init__(self, *, casting: bool = True) -> None:
        self.casting = casting

    def filter(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        if isinstance(value, int | float):
            return bool(value)
        if isinstance(value, bytes):
            value = value.decode("utf-8", errors="replace")
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return False
            try:
                return _BOOL_ADAPTER.validate_python(text)
            except ValidationError as exc:
                if self.casting:
                    return True
                raise InvalidArgumentError(f"Cannot interpret {value!r} as a boolean.") from exc
        if self.casting:
            return bool(value)
        raise InvalidArgumentError(f"Cannot interpret {type(value).__name__} as a boolean.")

    __call__ = filter


__all__ = ["BooleanFilter"]
