"""Pluggable memory allocators working on ``bytearray`` buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .errors import BadAllocError, InvalidArgumentError

AllocateFn = Callable[[int, Any], Optional[bytearray]]
DeallocateFn = Callable[[Optional[bytearray], Any], None]
ReallocateFn = Callable[[Optional[bytearray], int, Any], Optional[bytearray]]
ZeroAllocateFn = Callable[[int, int, Any], Optional[bytearray]]


@dataclass(frozen=True)
class Allocator:
    """A set of allocation functions sharing an opaque ``state``.

    Each function may return ``None`` to report that no memory was obtained.
    """

    allocate: Optional[AllocateFn] = None
    deallocate: Optional[DeallocateFn] = None
    reallocate: Optional[ReallocateFn] = None
    zero_allocate: Optional[ZeroAllocateFn] = None
    state: Any = None

    def is_valid(self) -> bool:
        """Return whether every allocation function is present."""
        return None not in (
            self.allocate,
            self.deallocate,
            self.reallocate,
            self.zero_allocate,
        )


def _default_allocate(size: int, state: Any) -> bytearray:
    return bytearray(size)


def _default_deallocate(buffer: Optional[bytearray], state: Any) -> None:
    if buffer is not None:
        buffer.clear()


def _default_reallocate(buffer: Optional[bytearray], size: int, state: Any) -> bytearray:
    resized = bytearray(size)
    if buffer:
        kept = min(size, len(buffer))
        resized[:kept] = buffer[:kept]
    return resized


def _default_zero_allocate(number_of_elements: int, size_of_element: int, state: Any) -> bytearray:
    return bytearray(number_of_elements * size_of_element)


_DEFAULT_ALLOCATOR = Allocator(
    allocate=_default_allocate,
    deallocate=_default_deallocate,
    reallocate=_default_reallocate,
    zero_allocate=_default_zero_allocate,
)

_ZERO_ALLOCATOR = Allocator()


def get_default_allocator() -> Allocator:
    """Return the allocator backed by ordinary ``bytearray`` objects."""
    return _DEFAULT_ALLOCATOR


def get_zero_initialized_allocator() -> Allocator:
    """Return an allocator with no functions; it is not valid."""
    return _ZERO_ALLOCATOR


def reallocf(buffer: Optional[bytearray], size: int, allocator: Allocator) -> bytearray:
    """Resize ``buffer``; on failure release it and raise :class:`BadAllocError`."""
    if allocator is None or not allocator.is_valid():
        raise InvalidArgumentError(
            "reallocf(): invalid allocator or allocator function pointers"
        )
    resized = allocator.reallocate(buffer, size, allocator.state)
    if resized is None:
        allocator.deallocate(buffer, allocator.state)
        raise BadAllocError("failed to reallocate memory")
    return resized