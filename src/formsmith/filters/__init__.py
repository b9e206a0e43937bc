"""Value filters used by annotation metadata."""

from __future__ import annotations

from .boolean import BooleanFilter


__all__ = ["BooleanFilter"]
