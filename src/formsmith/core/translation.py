"""Translator collaborators used to localise attribute values."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import gettext
from pathlib import Path
from typing import Protocol, runtime_checkable


DEFAULT_TEXT_DOMAIN = "default"


@runtime_checkable
class Translator(Protocol):
    """Interface implemented by translators bound to form helpers.

    Implementations must return ``message`` unchanged when they hold no
    translation for it.
    """

    def translate(self, message: str, text_domain: str = DEFAULT_TEXT_DOMAIN) -> str: ...


class MappingTranslator:
    """Translator backed by in-memory catalogs keyed by text domain."""

    def __init__(self, catalogs: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._catalogs: dict[str, dict[str, str]] = {
            domain: dict(messages) for domain, messages in (catalogs or {}).items()
        }

    def add(self, message: str, translation: str, text_domain: str = DEFAULT_TEXT_DOMAIN) -> None:
        """Register ``translation`` for ``message`` in ``text_domain``."""
        self._catalogs.setdefault(text_domain, {})[message] = translation

    def translate(self, message: str, text_domain: str = DEFAULT_TEXT_DOMAIN) -> str:
        return self._catalogs.get(text_domain, {}).get(message, message)


class GettextTranslator:
    """Translator delegating to :mod:`gettext` catalogs, one per text domain."""

    def __init__(self, translations: Mapping[str, gettext.NullTranslations] | None = None) -> None:
        self._translations: dict[str, gettext.NullTranslations] = dict(translations or {})

    @classmethod
    def from_locale_dir(
        cls,
        locale_dir: Path | str,
        domains: Iterable[str],
        languages: Iterable[str] | None = None,
    ) -> GettextTranslator:
        """Load compiled ``.mo`` catalogs for ``domains`` from ``locale_dir``.

        Missing catalogs fall back to :class:`gettext.NullTranslations`.
        """
        language_list = list(languages) if languages is not None else None
        translations = {
            domain: gettext.translation(
                domain, localedir=str(locale_dir), languages=language_list, fallback=True
            )
            for domain in domains
        }
        return cls(translations)

    def add_translations(
        self, translations: gettext.NullTranslations, text_domain: str = DEFAULT_TEXT_DOMAIN
    ) -> None:
        """Bind ``translations`` to ``text_domain``, replacing any previous catalog."""
        self._translations[text_domain] = translations

    def translate(self, message: str, text_domain: str = DEFAULT_TEXT_DOMAIN) -> str:
        catalog = self._translations.get(text_domain)
        if catalog is None:
            return message
        return catalog.gettext(message)


__all__ = [
    "DEFAULT_TEXT_DOMAIN",
    "GettextTranslator",
    "MappingTranslator",
    "Translator",
]
