"""Rendering of extracted posts into a single digest document."""

from .formatter import format_digest, format_post, SEPARATOR

__all__ = [
    "format_digest",
    "format_post",
    "SEPARATOR",
]
