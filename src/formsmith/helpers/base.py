"""Attribute string rendering shared by every form helper.

:class:`AbstractHelper` turns an ordered attribute mapping into the text that
follows a tag name in an HTML start tag. Each entry goes through the same
steps, in input order:

`Filtering`
: names outside the helper's allow-list are dropped, as are ``None`` values.

`Boolean attributes`
: attributes such as ``disabled`` or ``checked`` map truthy values to their
  "on" token and falsy values to their "off" token. An empty "off" token
  drops the attribute.

`Translation`
: when a translator is bound and enabled, values of translatable attributes
  are passed through it with the helper's text domain.

`Escaping`
: values are escaped for a double-quoted attribute. A value that cannot be
  represented in the configured encoding is rendered blank.

Configuration problems (malformed names handed to the allow-list mutators)
raise :class:`~formsmith.core.exceptions.InvalidArgumentError`. Data problems
met while rendering are reported to the diagnostics emitter and never raised.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from pydantic import ValidationError

from formsmith.core.attributes import (
    VALID_ATTRIBUTE_NAME,
    AllowList,
    TranslatableDefaults,
    get_default_translatables,
)
from formsmith.core.config import RendererSettings
from formsmith.core.diagnostics import DiagnosticEmitter, LoggingEmitter
from formsmith.core.escaper import Escaper
from formsmith.core.exceptions import EscaperError, InvalidArgumentError
from formsmith.core.translation import Translator
from formsmith.core.values import BOOLEAN_ATTRIBUTES, AttributeValue, stringify


class AbstractHelper:
    """Base class for helpers rendering HTML attribute strings."""

    #: Attributes valid for the tag rendered by the helper, on top of the globals.
    tag_attributes: ClassVar[Iterable[str]] = ()

    #: Attributes whose values are translated by default.
    translatable_defaults: ClassVar[Iterable[str]] = ("placeholder", "title")

    def __init__(
        self,
        settings: RendererSettings | None = None,
        *,
        defaults: TranslatableDefaults | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self._settings = settings.model_copy(deep=True) if settings else RendererSettings()
        self._defaults = defaults if defaults is not None else get_default_translatables()
        self._emitter = emitter or LoggingEmitter()
        self._escaper = Escaper(self._settings.encoding)
        self._translator: Translator | None = None

        self._valid = AllowList.with_globals(self.tag_attributes)
        self._translatable = AllowList()
        for name in self.translatable_defaults:
            self._translatable.add(name)

        for name in self._settings.extra_valid_attributes:
            self._valid.add(name)
        for prefix in self._settings.extra_valid_prefixes:
            self._valid.add_prefix(prefix)
        for name in self._settings.translatable_attributes:
            self._translatable.add(name)
        for prefix in self._settings.translatable_prefixes:
            self._translatable.add_prefix(prefix)

    # -- allow-list -------------------------------------------------------

    def add_valid_attribute(self, name: str) -> AbstractHelper:
        """Allow ``name`` in the attribute strings rendered by this helper."""
        self._valid.add(name)
        return self

    def add_valid_attribute_prefix(self, prefix: str) -> AbstractHelper:
        """Allow every attribute starting with ``prefix``."""
        self._valid.add_prefix(prefix)
        return self

    def is_valid_attribute(self, name: str) -> bool:
        return self._valid.allows(name)

    # -- translatable attributes -----------------------------------------

    def add_translatable_attribute(self, name: str) -> AbstractHelper:
        """Translate values of ``name`` rendered by this helper."""
        self._translatable.add(name)
        return self

    def add_translatable_attribute_prefix(self, prefix: str) -> AbstractHelper:
        """Translate values of attributes starting with ``prefix``."""
        self._translatable.add_prefix(prefix)
        return self

    @staticmethod
    def add_default_translatable_attribute(name: str) -> None:
        """Translate ``name`` in every helper using the shared defaults."""
        get_default_translatables().add(name)

    @staticmethod
    def add_default_translatable_attribute_prefix(prefix: str) -> None:
        """Translate attributes starting with ``prefix`` in every helper using the shared defaults."""
        get_default_translatables().add_prefix(prefix)

    def is_translatable_attribute(self, name: str) -> bool:
        return self._translatable.allows(name) or self._defaults.matches(name)

    # -- settings ---------------------------------------------------------

    @property
    def settings(self) -> RendererSettings:
        return self._settings

    @property
    def encoding(self) -> str:
        return self._settings.encoding

    def _update_setting(self, key: str, value: Any) -> None:
        try:
            setattr(self._settings, key, value)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid {key} {value!r}.") from exc

    def set_encoding(self, encoding: str) -> AbstractHelper:
        """Switch the encoding used to interpret and escape values."""
        self._update_setting("encoding", encoding)
        self._escaper = Escaper(self._settings.encoding)
        return self

    @property
    def doctype(self) -> str:
        return self._settings.doctype

    def set_doctype(self, doctype: str) -> AbstractHelper:
        self._update_setting("doctype", doctype)
        return self

    def get_inline_closing_bracket(self) -> str:
        """Return the bracket closing a void element for the current doctype."""
        return " />" if self._settings.is_xhtml else ">"

    # -- translation ------------------------------------------------------

    @property
    def translator(self) -> Translator | None:
        return self._translator

    def has_translator(self) -> bool:
        return self._translator is not None

    def set_translator(
        self, translator: Translator | None, text_domain: str | None = None
    ) -> AbstractHelper:
        """Bind ``translator`` and optionally switch the text domain."""
        if text_domain is not None:
            self._update_setting("text_domain", text_domain)
        self._translator = translator
        return self

    @property
    def text_domain(self) -> str:
        return self._settings.text_domain

    def set_translator_text_domain(self, text_domain: str) -> AbstractHelper:
        self._update_setting("text_domain", text_domain)
        return self

    @property
    def translator_enabled(self) -> bool:
        return self._settings.translator_enabled

    def set_translator_enabled(self, enabled: bool = True) -> AbstractHelper:
        self._update_setting("translator_enabled", enabled)
        return self

    def _translate(self, name: str, value: str | bytes) -> str | bytes:
        if (
            not value
            or not isinstance(value, str)
            or self._translator is None
            or not self._settings.translator_enabled
            or not self.is_translatable_attribute(name)
        ):
            return value
        text_domain = self._settings.text_domain
        translated = self._translator.translate(value, text_domain)
        if self._emitter.debug_enabled:
            self._emitter.event(
                "translation_applied", {"attribute": name, "text_domain": text_domain}
            )
        return translated

    # -- rendering --------------------------------------------------------

    def _prepare_value(self, name: str, value: AttributeValue) -> str | bytes | None:
        if value is None:
            return None
        boolean = BOOLEAN_ATTRIBUTES.get(name)
        if boolean is not None:
            token = boolean.resolve(value)
            return token or None
        return stringify(value)

    def create_attributes_string(self, attributes: Mapping[str, Any]) -> str:
        """Render ``attributes`` as ``name="value"`` pairs joined by single spaces.

        Keys differing only in case collapse into one entry at the position of
        the first occurrence, holding the value of the last one.
        """
        folded: dict[str, Any] = {}
        for key, raw_value in attributes.items():
            folded[str(key).lower()] = raw_value

        rendered: list[str] = []
        for name, raw_value in folded.items():
            if not VALID_ATTRIBUTE_NAME.fullmatch(name):
                self._emitter.event(
                    "attribute_skipped", {"attribute": name, "reason": "malformed name"}
                )
                continue
            if not self.is_valid_attribute(name):
                self._emitter.event("attribute_skipped", {"attribute": name})
                continue

            value = self._prepare_value(name, raw_value)
            if value is None:
                continue

            value = self._translate(name, value)
            escaped_name = self._escaper.escape_html(name)
            try:
                escaped_value = self._escaper.escape_html_attr(value)
            except EscaperError as exc:
                self._emitter.warning(
                    f"Blanked value of attribute '{name}': not representable in {self.encoding}",
                    exc,
                )
                escaped_value = ""
            rendered.append(f'{escaped_name}="{escaped_value}"')
        return " ".join(rendered)


__all__ = ["AbstractHelper"]
