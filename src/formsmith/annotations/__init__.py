"""Metadata objects describing form inputs."""

from __future__ import annotations

from .required import Required


__all__ = ["Required"]
