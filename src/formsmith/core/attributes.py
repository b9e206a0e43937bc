"""Attribute-name grammar and the allow-lists consulted while rendering.

Two kinds of sets are tracked:

`AllowList`
: names and prefixes permitted to appear in rendered output. Every helper
  owns one, seeded with the global HTML attributes and grown by the helper
  and its callers.

`TranslatableDefaults`
: process-wide default translatable names and prefixes. Helpers hold a
  reference to the registry they were built with and query it on every
  lookup, so registrations made later are visible to existing helpers.

Both only grow. Names are validated against a fixed grammar before they are
stored and are compared lowercased.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import re
from threading import Lock

from .exceptions import InvalidArgumentError


VALID_ATTRIBUTE_NAME = re.compile(r"[^\t\n\f />\"'=]+")

GLOBAL_ATTRIBUTES = frozenset(
    {
        "accesskey",
        "class",
        "contenteditable",
        "contextmenu",
        "dir",
        "draggable",
        "dropzone",
        "hidden",
        "id",
        "lang",
        "spellcheck",
        "style",
        "tabindex",
        "title",
        "xml:base",
        "xml:lang",
        "xml:space",
    }
)

EVENT_ATTRIBUTES = frozenset(
    {
        "onabort",
        "onblur",
        "oncanplay",
        "oncanplaythrough",
        "onchange",
        "onclick",
        "oncontextmenu",
        "ondblclick",
        "ondrag",
        "ondragend",
        "ondragenter",
        "ondragleave",
        "ondragover",
        "ondragstart",
        "ondrop",
        "ondurationchange",
        "onemptied",
        "onended",
        "onerror",
        "onfocus",
        "oninput",
        "oninvalid",
        "onkeydown",
        "onkeypress",
        "onkeyup",
        "onload",
        "onloadeddata",
        "onloadedmetadata",
        "onloadstart",
        "onmousedown",
        "onmousemove",
        "onmouseout",
        "onmouseover",
        "onmouseup",
        "onmousewheel",
        "onpause",
        "onplay",
        "onplaying",
        "onprogress",
        "onratechange",
        "onreadystatechange",
        "onreset",
        "onscroll",
        "onseeked",
        "onseeking",
        "onselect",
        "onshow",
        "onstalled",
        "onsubmit",
        "onsuspend",
        "ontimeupdate",
        "onvolumechange",
        "onwaiting",
    }
)

GLOBAL_PREFIXES = ("data-", "aria-", "x-")


def validate_attribute_name(name: str) -> str:
    """Return the lowercased ``name`` or raise when it breaks the grammar."""
    if not isinstance(name, str) or not VALID_ATTRIBUTE_NAME.fullmatch(name):
        raise InvalidArgumentError(f"{name!r} is not a valid attribute name or prefix.")
    return name.lower()


def _starts_with_any(name: str, prefixes: Iterable[str]) -> bool:
    return any(name.startswith(prefix) for prefix in prefixes)


@dataclass(slots=True)
class AllowList:
    """Exact names and prefixes permitted in rendered output."""

    names: set[str] = field(default_factory=set)
    prefixes: set[str] = field(default_factory=set)

    @classmethod
    def with_globals(cls, names: Iterable[str] = ()) -> AllowList:
        """Seed an allow-list with the global HTML attributes plus ``names``."""
        allow_list = cls(
            names=set(GLOBAL_ATTRIBUTES | EVENT_ATTRIBUTES),
            prefixes=set(GLOBAL_PREFIXES),
        )
        for name in names:
            allow_list.add(name)
        return allow_list

    def add(self, name: str) -> None:
        """Permit the exact attribute ``name``."""
        self.names.add(validate_attribute_name(name))

    def add_prefix(self, prefix: str) -> None:
        """Permit every attribute starting with ``prefix``."""
        self.prefixes.add(validate_attribute_name(prefix))

    def allows(self, name: str) -> bool:
        """Return True when ``name`` matches an exact entry or a prefix."""
        key = name.lower()
        return key in self.names or _starts_with_any(key, self.prefixes)


@dataclass(slots=True)
class TranslatableDefaults:
    """Thread-safe registry of default translatable names and prefixes."""

    _names: set[str] = field(default_factory=set)
    _prefixes: set[str] = field(default_factory=set)
    _lock: Lock = field(default_factory=Lock)

    def add(self, name: str) -> None:
        """Mark ``name`` as translatable for every helper sharing the registry."""
        key = validate_attribute_name(name)
        with self._lock:
            self._names.add(key)

    def add_prefix(self, prefix: str) -> None:
        """Mark every attribute starting with ``prefix`` as translatable."""
        key = validate_attribute_name(prefix)
        with self._lock:
            self._prefixes.add(key)

    def matches(self, name: str) -> bool:
        """Return True when ``name`` is a default translatable attribute."""
        key = name.lower()
        with self._lock:
            return key in self._names or _starts_with_any(key, self._prefixes)

    def snapshot(self) -> tuple[frozenset[str], frozenset[str]]:
        """Return frozen copies of the registered names and prefixes."""
        with self._lock:
            return frozenset(self._names), frozenset(self._prefixes)


_DEFAULTS = TranslatableDefaults()


def get_default_translatables() -> TranslatableDefaults:
    """Return the process-wide default translatable registry."""
    return _DEFAULTS


__all__ = [
    "EVENT_ATTRIBUTES",
    "GLOBAL_ATTRIBUTES",
    "GLOBAL_PREFIXES",
    "VALID_ATTRIBUTE_NAME",
    "AllowList",
    "TranslatableDefaults",
    "get_default_translatables",
    "validate_attribute_name",
]
