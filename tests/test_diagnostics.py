from __future__ import annotations

import logging

import pytest

from formsmith import LoggingEmitter, NullEmitter
from formsmith.core.diagnostics import DiagnosticEmitter, format_event_message


def test_null_emitter_is_noop(caplog: pytest.LogCaptureFixture) -> None:
    emitter = NullEmitter()
    with caplog.at_level(logging.DEBUG):
        emitter.warning("nothing to see")
        emitter.warning("still quiet", exc=ValueError("x"))
        emitter.event("attribute_skipped", {"attribute": "x"})
    assert not caplog.records
    assert emitter.debug_enabled is False


def test_logging_emitter_logs_messages(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(debug_enabled=True)
    with caplog.at_level(logging.WARNING):
        emitter.warning("boom")
    assert any(record.message == "boom" for record in caplog.records)
    assert emitter.debug_enabled is True


def test_logging_emitter_logs_events_at_debug_level(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter()
    with caplog.at_level(logging.DEBUG):
        emitter.event("attribute_skipped", {"attribute": "data-x"})
        emitter.event("custom", {"flag": True})
    assert [record.levelno for record in caplog.records] == [logging.DEBUG, logging.DEBUG]
    assert caplog.records[0].getMessage() == "Skipping attribute 'data-x' (not allowed)"


def test_emitters_satisfy_protocol() -> None:
    assert isinstance(NullEmitter(), DiagnosticEmitter)
    assert isinstance(LoggingEmitter(), DiagnosticEmitter)


@pytest.mark.parametrize(
    ("name", "payload", "expected"),
    [
        ("attribute_skipped", {"attribute": "foo"}, "Skipping attribute 'foo' (not allowed)"),
        (
            "attribute_skipped",
            {"attribute": "a b", "reason": "malformed name"},
            "Skipping attribute 'a b' (malformed name)",
        ),
        (
            "translation_applied",
            {"attribute": "title", "text_domain": "forms"},
            "Translated attribute 'title' in domain 'forms'",
        ),
        ("unknown", {}, None),
    ],
)
def test_format_event_message(name: str, payload: dict, expected: str | None) -> None:
    assert format_event_message(name, payload) == expected
