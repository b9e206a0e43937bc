"""Primary public API for formsmith."""

from __future__ import annotations

from formsmith.annotations import Required
from formsmith.core.attributes import (
    AllowList,
    TranslatableDefaults,
    get_default_translatables,
    validate_attribute_name,
)
from formsmith.core.config import RendererSettings
from formsmith.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from formsmith.core.element import Element
from formsmith.core.escaper import Escaper
from formsmith.core.exceptions import (
    DomainError,
    EscaperError,
    FormsmithError,
    InvalidArgumentError,
)
from formsmith.core.translation import GettextTranslator, MappingTranslator, Translator
from formsmith.filters import BooleanFilter
from formsmith.helpers import AbstractHelper, FormInput, FormNumber, FormText
from formsmith.version import get_version


__version__ = get_version()

__all__ = [
    "AbstractHelper",
    "AllowList",
    "BooleanFilter",
    "DiagnosticEmitter",
    "DomainError",
    "Element",
    "Escaper",
    "EscaperError",
    "FormInput",
    "FormNumber",
    "FormText",
    "FormsmithError",
    "GettextTranslator",
    "InvalidArgumentError",
    "LoggingEmitter",
    "MappingTranslator",
    "NullEmitter",
    "RendererSettings",
    "Required",
    "TranslatableDefaults",
    "Translator",
    "__version__",
    "get_default_translatables",
    "get_version",
    "validate_attribute_name",
]
