"""Character search, substring replacement and bounded printf-style formatting."""

from __future__ import annotations

from typing import Optional

from .allocator import Allocator
from .errors import BadAllocError, InvalidArgumentError, RcutilsError

NOT_FOUND = -1
"""Returned by the find functions when the delimiter does not occur."""

_ENCODING = "utf-8"


def _check_delimiter(delimiter: str) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise InvalidArgumentError("delimiter must be a single character")


def find(string: Optional[str], delimiter: str) -> int:
    """Return the index of the first ``delimiter`` in ``string``, or ``NOT_FOUND``."""
    if not string:
        return NOT_FOUND
    return findn(string, delimiter, len(string))


def findn(string: Optional[str], delimiter: str, string_length: int) -> int:
    """Like :func:`find`, looking only at the first ``string_length`` characters."""
    _check_delimiter(delimiter)
    if not string or string_length <= 0:
        return NOT_FOUND
    for index, character in enumerate(string[:string_length]):
        if character == delimiter:
            return index
    return NOT_FOUND


def find_last(string: Optional[str], delimiter: str) -> int:
    """Return the index of the last ``delimiter`` in ``string``, or ``NOT_FOUND``."""
    if not string:
        return NOT_FOUND
    return find_lastn(string, delimiter, len(string))


def find_lastn(string: Optional[str], delimiter: str, string_length: int) -> int:
    """Like :func:`find_last`, looking only at the first ``string_length`` characters."""
    _check_delimiter(delimiter)
    if not string or string_length <= 0:
        return NOT_FOUND
    head = string[:string_length]
    for index in reversed(range(len(head))):
        if head[index] == delimiter:
            return index
    return NOT_FOUND


def repl_str(string: str, old: str, new: str) -> str:
    """Return ``string`` with every occurrence of ``old`` replaced by ``new``.

    ``old`` must not be empty.
    """
    if string is None or old is None or new is None:
        raise InvalidArgumentError("arguments must not be None")
    if not old:
        raise InvalidArgumentError("the string to replace must not be empty")
    return string.replace(old, new)


def format_string_limit(allocator: Allocator, limit: int, format_string: str, *args) -> str:
    """Return ``format_string % args`` cut to at most ``limit - 1`` bytes.

    The output is built in a buffer obtained from ``allocator``.
    """
    if format_string is None:
        raise InvalidArgumentError("format_string must not be None")
    if allocator is None or not allocator.is_valid():
        raise InvalidArgumentError("invalid allocator")
    if limit < 1:
        raise InvalidArgumentError("limit must be at least 1")
    try:
        text = format_string % args
    except (TypeError, ValueError, KeyError) as exc:
        raise RcutilsError("formatting failed") from exc

    encoded = text.encode(_ENCODING)
    to_write = min(len(encoded), limit - 1)
    buffer = allocator.allocate(to_write + 1, allocator.state)
    if buffer is None:
        raise BadAllocError("failed to allocate memory for formatted string")
    try:
        buffer[:to_write] = encoded[:to_write]
        buffer[to_write] = 0
        return bytes(buffer[:to_write]).decode(_ENCODING, errors="ignore")
    finally:
        allocator.deallocate(buffer, allocator.state)