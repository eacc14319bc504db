"""A growable list of fixed-size binary records kept in one allocator buffer."""

from __future__ import annotations

from typing import Iterator, Optional

from .allocator import Allocator, get_default_allocator
from .errors import BadAllocError, InvalidArgumentError


class ArrayList:
    """Records of ``data_size`` bytes stored back to back in one buffer.

    The buffer comes from ``allocator`` and doubles in capacity when full.
    """

    def __init__(
        self,
        initial_capacity: int,
        data_size: int,
        allocator: Optional[Allocator] = None,
    ) -> None:
        if allocator is None:
            allocator = get_default_allocator()
        if not allocator.is_valid():
            raise InvalidArgumentError("invalid allocator")
        if initial_capacity < 1:
            raise InvalidArgumentError("initial_capacity cannot be less than 1")
        if data_size < 1:
            raise InvalidArgumentError("data_size cannot be less than 1")

        buffer = allocator.allocate(initial_capacity * data_size, allocator.state)
        if buffer is None:
            raise BadAllocError("failed to allocate memory for array list data")

        self._buffer: Optional[bytearray] = buffer
        self._capacity = initial_capacity
        self._size = 0
        self._data_size = data_size
        self._allocator = allocator

    def __enter__(self) -> "ArrayList":
        return self

    def __exit__(self, *exc_info) -> None:
        if self._buffer is not None:
            self.close()

    @property
    def capacity(self) -> int:
        """Number of records the current buffer can hold."""
        self._check_open()
        return self._capacity

    @property
    def data_size(self) -> int:
        """Size in bytes of one record."""
        return self._data_size

    def _check_open(self) -> None:
        if self._buffer is None:
            raise InvalidArgumentError("array_list is not initialized")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise InvalidArgumentError("index is out of bounds of the list")

    def _record(self, data) -> bytes:
        if data is None:
            raise InvalidArgumentError("data argument is None")
        raw = bytes(data)
        if len(raw) < self._data_size:
            raise InvalidArgumentError(
                f"data must hold at least {self._data_size} bytes"
            )
        return raw[: self._data_size]

    def _slot(self, index: int) -> slice:
        start = index * self._data_size
        return slice(start, start + self._data_size)

    def _increase_capacity(self) -> None:
        new_capacity = 2 * self._capacity
        resized = self._allocator.reallocate(
            self._buffer, new_capacity * self._data_size, self._allocator.state
        )
        if resized is None:
            raise BadAllocError("failed to grow array list")
        self._buffer = resized
        self._capacity = new_capacity

    def add(self, data) -> None:
        """Append one record, growing the buffer when it is full."""
        self._check_open()
        record = self._record(data)
        if self._size + 1 > self._capacity:
            self._increase_capacity()
        self._buffer[self._slot(self._size)] = record
        self._size += 1

    def set(self, index: int, data) -> None:
        """Overwrite the record at ``index``."""
        self._check_open()
        record = self._record(data)
        self._check_index(index)
        self._buffer[self._slot(index)] = record

    def remove(self, index: int) -> None:
        """Drop the record at ``index``, shifting later records down."""
        self._check_open()
        self._check_index(index)
        size = self._data_size
        end = self._size * size
        self._buffer[index * size : end - size] = self._buffer[(index + 1) * size : end]
        self._size -= 1

    def get(self, index: int) -> bytes:
        """Return a copy of the record at ``index``."""
        self._check_open()
        self._check_index(index)
        return bytes(self._buffer[self._slot(index)])

    def __len__(self) -> int:
        self._check_open()
        return self._size

    def __iter__(self) -> Iterator[bytes]:
        self._check_open()
        for index in range(self._size):
            yield bytes(self._buffer[self._slot(index)])

    def close(self) -> None:
        """Release the buffer; the list can no longer be used."""
        self._check_open()
        self._allocator.deallocate(self._buffer, self._allocator.state)
        self._buffer = None