from __future__ import annotations

import pytest

from formsmith import Escaper, EscaperError


def test_escapes_punctuation_and_spaces_as_hex_references() -> None:
    escaper = Escaper()

    assert (
        escaper.escape_html_attr("breaking your HTML like a boss! \\")
        == "breaking&#x20;your&#x20;HTML&#x20;like&#x20;a&#x20;boss&#x21;&#x20;&#x5C;"
    )


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('"', "&quot;"),
        ("&", "&amp;"),
        ("<", "&lt;"),
        (">", "&gt;"),
        ("'", "&#x27;"),
        ("/", "&#x2F;"),
        ("=", "&#x3D;"),
        ("`", "&#x60;"),
        ("\t", "&#x09;"),
        ("\x00", "&#xFFFD;"),
        ("\x7f", "&#xFFFD;"),
        ("\x85", "&#xFFFD;"),
        ("é", "&#xE9;"),
        ("€", "&#x20AC;"),
        ("😀", "&#x1F600;"),
    ],
)
def test_escapes_individual_characters(raw: str, expected: str) -> None:
    assert Escaper().escape_html_attr(raw) == expected


def test_keeps_safe_characters() -> None:
    assert Escaper().escape_html_attr("a-b_c.d,E9") == "a-b_c.d,E9"
    assert Escaper().escape_html_attr("") == ""
    assert Escaper().escape_html_attr("12345") == "12345"


def test_malformed_utf8_bytes_raise() -> None:
    with pytest.raises(EscaperError):
        Escaper().escape_html_attr(b"\xc3\x28")


def test_bytes_are_interpreted_with_configured_encoding() -> None:
    payload = "Título".encode()

    assert Escaper("utf-8").escape_html_attr(payload) == "T&#xED;tulo"
    assert Escaper("iso-8859-1").escape_html_attr(payload) == "T&#xC3;&#xAD;tulo"


def test_text_must_be_representable_in_encoding() -> None:
    escaper = Escaper("iso-8859-1")

    assert escaper.escape_html_attr("Título") == "T&#xED;tulo"
    with pytest.raises(EscaperError):
        escaper.escape_html_attr("price €")


def test_unknown_encoding_is_rejected() -> None:
    with pytest.raises(EscaperError, match="Unknown encoding"):
        Escaper("not-a-codec")


def test_escape_html_uses_text_rules() -> None:
    assert Escaper().escape_html('<a href="x">') == "&lt;a href=&#34;x&#34;&gt;"
