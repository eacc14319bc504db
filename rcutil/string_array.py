"""A fixed-size array of strings with lexicographic comparison."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .allocator import Allocator, get_default_allocator
from .errors import BadAllocError, InvalidArgumentError


class StringArray:
    """``size`` string slots, each initially ``None``.

    After :meth:`close` the array holds no data and cannot be compared.
    """

    def __init__(self, size: int = 0, allocator: Optional[Allocator] = None) -> None:
        if allocator is None:
            allocator = get_default_allocator()
        if not allocator.is_valid():
            raise InvalidArgumentError("string array has no valid allocator")
        if size < 0:
            raise InvalidArgumentError("size must not be negative")
        if size > 0 and allocator.zero_allocate(size, 1, allocator.state) is None:
            raise BadAllocError("failed to allocate string array")
        self.allocator = allocator
        self.data: Optional[List[Optional[str]]] = [None] * size

    @property
    def size(self) -> int:
        """Number of slots."""
        return 0 if self.data is None else len(self.data)

    def __enter__(self) -> "StringArray":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __len__(self) -> int:
        return self.size

    def _checked_data(self) -> List[Optional[str]]:
        if self.data is None:
            raise InvalidArgumentError("string array holds no data")
        return self.data

    def __getitem__(self, index: int) -> Optional[str]:
        return self._checked_data()[index]

    def __setitem__(self, index: int, value: Optional[str]) -> None:
        self._checked_data()[index] = value

    def __iter__(self) -> Iterator[Optional[str]]:
        return iter(self._checked_data())

    def close(self) -> None:
        """Drop every string and the slots themselves."""
        if self.allocator is None or not self.allocator.is_valid():
            raise InvalidArgumentError("string array has no valid allocator")
        self.data = None

    def compare(self, other: "StringArray") -> int:
        """Return -1, 0 or 1 as ``self`` orders before, equal to or after ``other``."""
        if other is None:
            raise InvalidArgumentError("other must not be None")
        lhs = self._checked_data()
        rhs = other._checked_data()
        for left, right in zip(lhs, rhs):
            if left is None or right is None:
                raise InvalidArgumentError("string array holds an unset element")
            if left != right:
                return -1 if left < right else 1
        if len(lhs) != len(rhs):
            return -1 if len(lhs) < len(rhs) else 1
        return 0