"""Required annotation.

Specifies the value of the "required" flag for an input. The flag defaults to
``True``, so the annotation is mostly used to unset it, e.g. ``Required(False)``
or ``Required("no")``. Any value understood by :class:`BooleanFilter` is
accepted.
"""

from __future__ import annotations

from formsmith.filters.boolean import BooleanFilter


class Required:
    """Carry the "required" flag of an input."""

    def __init__(self, required: bool | str = True) -> None:
        if not isinstance(required, bool):
            required = BooleanFilter().filter(required)
        self._required = required

    @property
    def required(self) -> bool:
        return self._required

    def get_required(self) -> bool:
        return self._required

    def __repr__(self) -> str:
        return f"Required({self._required!r})"


__all__ = ["Required"]
