"""A lock-protected value offering the usual atomic operations."""

from __future__ import annotations

import threading
from typing import Any, Generic, Tuple, TypeVar

T = TypeVar("T")


class AtomicValue(Generic[T]):
    """A value that is read and changed under a lock.

    Each operation is atomic with respect to the others on the same
    instance.
    """

    __slots__ = ("_value", "_lock")

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.load()!r})"

    def load(self) -> T:
        """Return the current value."""
        with self._lock:
            return self._value

    def store(self, desired: T) -> None:
        """Replace the value with ``desired``."""
        with self._lock:
            self._value = desired

    def exchange(self, desired: T) -> T:
        """Replace the value with ``desired`` and return the previous one."""
        with self._lock:
            previous = self._value
            self._value = desired
            return previous

    def compare_exchange_strong(self, expected: T, desired: T) -> Tuple[bool, T]:
        """Store ``desired`` if the value equals ``expected``.

        Returns ``(True, expected)`` on success and ``(False, current)``
        otherwise, ``current`` being the value that was found.
        """
        with self._lock:
            if self._value == expected:
                self._value = desired
                return True, expected
            return False, self._value

    def fetch_add(self, arg: Any) -> T:
        """Add ``arg`` to the value and return the value before the addition."""
        with self._lock:
            previous = self._value
            self._value = previous + arg
            return previous