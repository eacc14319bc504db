"""A growable, NUL-terminated character buffer."""

from __future__ import annotations

from typing import Optional, Union

from .allocator import Allocator, get_default_allocator, reallocf
from .errors import BadAllocError, InvalidArgumentError, RcutilsError

_ENCODING = "utf-8"

BytesOrStr = Union[bytes, bytearray, memoryview, str]


def _as_bytes(src: BytesOrStr) -> bytes:
    if src is None:
        raise InvalidArgumentError("source must not be None")
    if isinstance(src, str):
        return src.encode(_ENCODING)
    return bytes(src)


class CharArray:
    """A byte buffer treated as a C string, growing as text is written to it.

    ``buffer_length`` counts the bytes in use, terminator included;
    ``buffer_capacity`` is the size of the buffer. When ``owns_buffer`` is
    false the buffer is never resized or released in place: a new one is
    allocated instead.
    """

    def __init__(self, buffer_capacity: int = 0, allocator: Optional[Allocator] = None) -> None:
        if allocator is None:
            allocator = get_default_allocator()
        self.buffer: Optional[bytearray] = None
        self.owns_buffer = True
        self.buffer_length = 0
        self.buffer_capacity = 0
        self.allocator = allocator
        self._init(buffer_capacity, allocator)

    def _init(self, buffer_capacity: int, allocator: Allocator) -> None:
        if allocator is None or not allocator.is_valid():
            raise RcutilsError("char array has no valid allocator")
        self.owns_buffer = True
        self.buffer_length = 0
        self.buffer_capacity = buffer_capacity
        self.allocator = allocator
        if buffer_capacity > 0:
            buffer = allocator.allocate(buffer_capacity, allocator.state)
            if buffer is None:
                self.buffer = None
                self.buffer_capacity = 0
                self.buffer_length = 0
                raise BadAllocError("failed to allocate memory for char array")
            self.buffer = buffer

    def __enter__(self) -> "CharArray":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release the buffer if owned and empty the array."""
        if self.owns_buffer:
            if self.allocator is None or not self.allocator.is_valid():
                raise RcutilsError("char array has no valid allocator")
            self.allocator.deallocate(self.buffer, self.allocator.state)
        self.buffer = None
        self.buffer_length = 0
        self.buffer_capacity = 0

    def resize(self, new_size: int) -> None:
        """Set the buffer capacity to ``new_size``, keeping what fits."""
        if new_size == 0:
            raise InvalidArgumentError("new size of char_array has to be greater than zero")
        allocator = self.allocator
        if allocator is None or not allocator.is_valid():
            raise RcutilsError("char array has no valid allocator")
        if new_size == self.buffer_capacity:
            return

        old_buffer = self.buffer
        old_size = self.buffer_capacity
        old_length = self.buffer_length

        if self.owns_buffer:
            try:
                self.buffer = reallocf(self.buffer, new_size, allocator)
            except BadAllocError:
                self.buffer = None
                raise BadAllocError("failed to reallocate memory for char array") from None
        else:
            self._init(new_size, allocator)
            kept = min(new_size, old_size)
            if kept > 0 and old_buffer is not None:
                self.buffer[:kept] = old_buffer[:kept]
                self.buffer[kept - 1] = 0

        self.buffer_capacity = new_size
        self.buffer_length = min(new_size, old_length)

    def expand_as_needed(self, new_size: int) -> None:
        """Grow the buffer to ``new_size`` only if it is smaller."""
        if new_size <= self.buffer_capacity:
            return
        self.resize(new_size)

    def sprintf(self, format_string: str, *args) -> None:
        """Write ``format_string % args`` to the buffer, growing it as needed."""
        try:
            text = format_string % args
        except (TypeError, ValueError, KeyError) as exc:
            raise RcutilsError("vsprintf on char array failed") from exc
        encoded = text.encode(_ENCODING)
        new_size = len(encoded) + 1
        if new_size > self.buffer_capacity:
            try:
                self.expand_as_needed(new_size)
            except RcutilsError as exc:
                raise type(exc)("char array failed to expand") from exc
        self.buffer[:new_size] = encoded + b"\0"
        self.buffer_length = new_size

    def memcpy(self, src: BytesOrStr, n: int) -> None:
        """Copy the first ``n`` bytes of ``src`` to the start of the buffer."""
        data = _as_bytes(src)
        if n > len(data):
            raise InvalidArgumentError("source holds fewer than n bytes")
        if n == 0:
            self.buffer_length = 0
            return
        self.expand_as_needed(n)
        self.buffer[:n] = data[:n]
        self.buffer_length = n

    def strcpy(self, src: BytesOrStr) -> None:
        """Copy ``src`` and its terminator to the buffer."""
        data = _as_bytes(src).split(b"\0", 1)[0] + b"\0"
        self.memcpy(data, len(data))

    def _strlen(self) -> int:
        if self.buffer is None:
            return 0
        end = self.buffer.find(b"\0", 0, self.buffer_capacity)
        return self.buffer_capacity if end < 0 else end

    def strncat(self, src: BytesOrStr, n: int) -> None:
        """Append at most ``n`` bytes of ``src`` to the string in the buffer."""
        data = _as_bytes(src)
        current = self._strlen()
        new_length = current + n + 1
        self.expand_as_needed(new_length)
        piece = data[:n].split(b"\0", 1)[0]
        end = current + len(piece)
        self.buffer[current:end] = piece
        self.buffer[end] = 0
        self.buffer_length = new_length

    def strcat(self, src: BytesOrStr) -> None:
        """Append the whole of ``src`` to the string in the buffer."""
        data = _as_bytes(src)
        self.strncat(data, len(data))

    def value(self) -> str:
        """Return the string held in the buffer, up to its terminator."""
        if self.buffer is None:
            return ""
        return bytes(self.buffer[: self._strlen()]).decode(_ENCODING)