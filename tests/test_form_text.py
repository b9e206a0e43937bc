from __future__ import annotations

import pytest

from formsmith import (
    Element,
    FormInput,
    FormText,
    MappingTranslator,
    RendererSettings,
    TranslatableDefaults,
)


def test_text_helper_forces_text_type() -> None:
    element = Element("query", {"type": "search", "minlength": 3, "step": "1"})

    markup = FormText(defaults=TranslatableDefaults())(element)

    assert markup == '<input name="query" type="text" minlength="3">'


def test_input_helper_uses_element_type() -> None:
    element = Element("agree", {"type": "checkbox", "checked": True})

    markup = FormInput(defaults=TranslatableDefaults()).render(element)

    assert markup == '<input name="agree" type="checkbox" checked="checked">'


def test_input_helper_defaults_to_text() -> None:
    markup = FormInput(defaults=TranslatableDefaults()).render(Element("q"))

    assert 'type="text"' in markup


def test_placeholder_is_translated_when_rendering_elements() -> None:
    helper = FormText(defaults=TranslatableDefaults())
    helper.set_translator(MappingTranslator({"forms": {"Your name": "Ihr Name"}}), "forms")
    element = Element("fullname", {"placeholder": "Your name"}, value="Ada")

    markup = helper.render(element)

    assert 'placeholder="Ihr&#x20;Name"' in markup
    assert markup.endswith('value="Ada">')


@pytest.mark.parametrize("disabled", [None, False, ""])
def test_falsy_boolean_attributes_are_dropped(disabled: object) -> None:
    element = Element("fullname", {"disabled": disabled, "readonly": True})

    markup = FormText(defaults=TranslatableDefaults()).render(element)

    assert "disabled" not in markup
    assert 'readonly="readonly"' in markup


def test_settings_apply_to_input_helpers() -> None:
    settings = RendererSettings(doctype="XHTML1_TRANSITIONAL", extra_valid_prefixes=["hx-"])
    element = Element("q", {"hx-get": "/search"})

    markup = FormText(settings, defaults=TranslatableDefaults()).render(element)

    assert markup == '<input name="q" hx-get="&#x2F;search" type="text" />'


def test_helper_settings_are_copied() -> None:
    settings = RendererSettings()
    helper = FormText(settings, defaults=TranslatableDefaults())

    helper.set_encoding("latin-1")

    assert settings.encoding == "utf-8"
    assert helper.encoding == "iso8859-1"
