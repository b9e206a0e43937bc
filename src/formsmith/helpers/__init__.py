"""Form helpers rendering attribute strings and input tags."""

from __future__ import annotations

from .base import AbstractHelper
from .form_input import FormInput
from .form_number import FormNumber
from .form_text import FormText


__all__ = ["AbstractHelper", "FormInput", "FormNumber", "FormText"]
