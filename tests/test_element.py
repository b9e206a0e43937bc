from __future__ import annotations

from formsmith import Element


def test_name_is_mirrored_in_attributes() -> None:
    element = Element("email")

    assert element.name == "email"
    assert element.get_attribute("name") == "email"


def test_set_attributes_merges_in_order() -> None:
    element = Element("email", {"class": "a"})
    element.set_attributes({"id": "b", "class": "c"})

    assert element.attributes == {"name": "email", "class": "c", "id": "b"}


def test_value_attribute_is_redirected_to_value() -> None:
    element = Element("email").set_attribute("value", "x@example.org")

    assert element.value == "x@example.org"
    assert not element.has_attribute("value")


def test_attributes_returns_a_copy() -> None:
    element = Element("email")
    element.attributes["id"] = "leak"

    assert not element.has_attribute("id")


def test_remove_attribute_and_label() -> None:
    element = Element("email", {"id": "e"}).remove_attribute("id").set_label("E-mail")

    assert not element.has_attribute("id")
    assert element.get_label() == "E-mail"
