"""A resizable byte buffer obtained from an allocator."""

from __future__ import annotations

from typing import Optional

from .allocator import Allocator, get_default_allocator, reallocf
from .errors import BadAllocError, InvalidArgumentError, RcutilsError


class Uint8Array:
    """A byte buffer with a capacity and a count of bytes in use.

    With a capacity of 0 no memory is allocated and ``buffer`` is ``None``.
    """

    def __init__(self, buffer_capacity: int = 0, allocator: Optional[Allocator] = None) -> None:
        if allocator is None:
            allocator = get_default_allocator()
        if not allocator.is_valid():
            raise InvalidArgumentError("uint8 array has no valid allocator")
        if buffer_capacity < 0:
            raise InvalidArgumentError("buffer_capacity must not be negative")

        self.buffer: Optional[bytearray] = None
        self.buffer_length = 0
        self.buffer_capacity = buffer_capacity
        self.allocator = allocator

        if buffer_capacity > 0:
            buffer = allocator.allocate(buffer_capacity, allocator.state)
            if buffer is None:
                self.buffer_capacity = 0
                raise BadAllocError("failed to allocate memory for uint8 array")
            self.buffer = buffer

    def __enter__(self) -> "Uint8Array":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __len__(self) -> int:
        return self.buffer_length

    def close(self) -> None:
        """Release the buffer and empty the array."""
        if self.allocator is None or not self.allocator.is_valid():
            raise RcutilsError("uint8 array has no valid allocator")
        self.allocator.deallocate(self.buffer, self.allocator.state)
        self.buffer = None
        self.buffer_length = 0
        self.buffer_capacity = 0

    def resize(self, new_size: int) -> None:
        """Set the capacity to ``new_size``, keeping the bytes that fit."""
        if new_size <= 0:
            raise InvalidArgumentError("new size of uint8_array has to be greater than zero")
        allocator = self.allocator
        if allocator is None or not allocator.is_valid():
            raise RcutilsError("uint8 array has no valid allocator")
        if new_size == self.buffer_capacity:
            return
        try:
            self.buffer = reallocf(self.buffer, new_size, allocator)
        except BadAllocError:
            self.buffer = None
            self.buffer_length = 0
            self.buffer_capacity = 0
            raise BadAllocError("failed to reallocate memory for uint8 array") from None
        self.buffer_capacity = new_size
        self.buffer_length = min(new_size, self.buffer_length)