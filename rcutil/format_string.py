"""printf-style formatting into allocator-backed strings."""

from __future__ import annotations

from .allocator import Allocator
from .strings import format_string_limit

DEFAULT_LIMIT = 2048
"""Largest buffer, terminator included, used by :func:`format_string`."""


def format_string(allocator: Allocator, format_string: str, *args) -> str:
    """Return ``format_string % args`` limited to ``DEFAULT_LIMIT - 1`` bytes."""
    return format_string_limit(allocator, DEFAULT_LIMIT, format_string, *args)