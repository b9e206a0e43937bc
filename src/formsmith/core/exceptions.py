"""Custom exception hierarchy for form rendering."""

from __future__ import annotations


class FormsmithError(RuntimeError):
    """Base exception for form rendering failures."""


class InvalidArgumentError(FormsmithError, ValueError):
    """Raised when a helper is configured with a malformed argument."""


class DomainError(FormsmithError):
    """Raised when a helper receives an element it cannot render."""


class EscaperError(FormsmithError):
    """Raised when a value cannot be represented in the configured encoding."""


__all__ = [
    "DomainError",
    "EscaperError",
    "FormsmithError",
    "InvalidArgumentError",
]
