"""Configuration models used by the form helpers.

RendererSettings

`encoding` (`str`)
: Character encoding used when escaping attribute values. Byte values are
  decoded with it and text values must be representable in it. Any codec known
  to :mod:`codecs` is accepted; the canonical lowercase name is stored.

`doctype` (`str`)
: Document type targeted by the generated markup. XHTML doctypes close void
  elements with `` />``, every other doctype with ``>``.

`translator_enabled` (`bool`)
: Toggle translation of translatable attribute values without unbinding the
  translator.

`text_domain` (`str`)
: Translation domain forwarded to the translator.

`extra_valid_attributes` (`list[str]`)
: Attribute names allowed on top of the helper's built-in baseline.

`extra_valid_prefixes` (`list[str]`)
: Attribute prefixes allowed on top of ``data-``, ``aria-`` and ``x-``.

`translatable_attributes` (`list[str]`)
: Attribute names whose values are translated by the helper.

`translatable_prefixes` (`list[str]`)
: Attribute prefixes whose values are translated by the helper.
"""

from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .attributes import validate_attribute_name


DEFAULT_ENCODING = "utf-8"

HTML5 = "HTML5"
XHTML_DOCTYPES = frozenset(
    {
        "XHTML11",
        "XHTML1_STRICT",
        "XHTML1_TRANSITIONAL",
        "XHTML1_FRAMESET",
        "XHTML1_RDFA",
        "XHTML1_RDFA11",
        "XHTML_BASIC1",
        "XHTML5",
    }
)
HTML_DOCTYPES = frozenset({HTML5, "HTML4_STRICT", "HTML4_LOOSE", "HTML4_FRAMESET"})


def normalize_encoding(value: str) -> str:
    """Return the canonical codec name for ``value``."""
    try:
        return codecs.lookup(value.strip()).name
    except LookupError as exc:
        raise ValueError(f"Unknown encoding '{value}'.") from exc


class RendererSettings(BaseModel):
    """Settings shared by every helper rendering attribute strings."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    encoding: str = DEFAULT_ENCODING
    doctype: str = HTML5
    translator_enabled: bool = True
    text_domain: str = "default"
    extra_valid_attributes: list[str] = Field(default_factory=list)
    extra_valid_prefixes: list[str] = Field(default_factory=list)
    translatable_attributes: list[str] = Field(default_factory=list)
    translatable_prefixes: list[str] = Field(default_factory=list)

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        return normalize_encoding(value)

    @field_validator("doctype")
    @classmethod
    def _check_doctype(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in HTML_DOCTYPES | XHTML_DOCTYPES:
            raise ValueError(f"Unknown doctype '{value}'.")
        return normalized

    @field_validator(
        "extra_valid_attributes",
        "extra_valid_prefixes",
        "translatable_attributes",
        "translatable_prefixes",
    )
    @classmethod
    def _check_names(cls, values: list[str]) -> list[str]:
        return [validate_attribute_name(value) for value in values]

    @property
    def is_xhtml(self) -> bool:
        """Return True when the doctype requires self-closing void elements."""
        return self.doctype in XHTML_DOCTYPES


__all__ = [
    "DEFAULT_ENCODING",
    "HTML5",
    "HTML_DOCTYPES",
    "XHTML_DOCTYPES",
    "RendererSettings",
    "normalize_encoding",
]
