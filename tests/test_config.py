from __future__ import annotations

from pydantic import ValidationError
import pytest

from formsmith import RendererSettings


def test_defaults() -> None:
    settings = RendererSettings()

    assert settings.encoding == "utf-8"
    assert settings.doctype == "HTML5"
    assert settings.translator_enabled is True
    assert settings.text_domain == "default"
    assert settings.is_xhtml is False


def test_encoding_is_normalised() -> None:
    assert RendererSettings(encoding="UTF8").encoding == "utf-8"
    assert RendererSettings(encoding="ISO-8859-1").encoding == "iso8859-1"


def test_unknown_encoding_is_rejected() -> None:
    with pytest.raises(ValidationError, match="Unknown encoding"):
        RendererSettings(encoding="bogus-encoding")


def test_doctype_is_validated() -> None:
    assert RendererSettings(doctype="xhtml5").is_xhtml is True
    with pytest.raises(ValidationError, match="Unknown doctype"):
        RendererSettings(doctype="html6")


def test_attribute_lists_use_the_name_grammar() -> None:
    settings = RendererSettings(extra_valid_attributes=["HX-Get"])

    assert settings.extra_valid_attributes == ["hx-get"]
    with pytest.raises(ValidationError):
        RendererSettings(translatable_prefixes=["bad prefix"])


def test_unknown_keys_are_forbidden() -> None:
    with pytest.raises(ValidationError):
        RendererSettings(charset="utf-8")
