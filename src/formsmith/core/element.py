"""Minimal form element consumed by the input helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class Element:
    """A named form element carrying ordered attributes and a value."""

    def __init__(
        self,
        name: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        value: Any = None,
    ) -> None:
        self._attributes: dict[str, Any] = {}
        self._name: str | None = None
        self._value = value
        self._label: str | None = None
        if name is not None:
            self.name = name
        if attributes:
            self.set_attributes(attributes)

    @property
    def name(self) -> str | None:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = name
        self._attributes["name"] = name

    @property
    def attributes(self) -> dict[str, Any]:
        """Return a copy of the attributes in insertion order."""
        return dict(self._attributes)

    def get_attribute(self, key: str) -> Any:
        return self._attributes.get(key)

    def has_attribute(self, key: str) -> bool:
        return key in self._attributes

    def set_attribute(self, key: str, value: Any) -> Element:
        """Set a single attribute; ``value`` assignments are redirected to the value."""
        if key == "value":
            self._value = value
            return self
        if key == "name":
            self.name = value
            return self
        self._attributes[key] = value
        return self

    def set_attributes(self, attributes: Mapping[str, Any]) -> Element:
        """Merge ``attributes`` into the existing ones."""
        for key, value in attributes.items():
            self.set_attribute(key, value)
        return self

    def remove_attribute(self, key: str) -> Element:
        self._attributes.pop(key, None)
        return self

    @property
    def value(self) -> Any:
        return self._value

    def set_value(self, value: Any) -> Element:
        self._value = value
        return self

    def get_label(self) -> str | None:
        return self._label

    def set_label(self, label: str) -> Element:
        self._label = label
        return self


__all__ = ["Element"]
