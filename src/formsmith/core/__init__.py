"""Core primitives shared by the form helpers."""
