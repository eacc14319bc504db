"""Thread-local error state and the exceptions raised across the package."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass

ERROR_MESSAGE_MAX_LENGTH = 1024
"""Size of a formatted error string, terminator included."""

ERROR_STATE_LINE_NUMBER_STR_MAX_LENGTH = 20
ERROR_FORMATTING_CHARACTERS = len(", at ") + len(":")
ERROR_STATE_MESSAGE_MAX_LENGTH = 768
"""Size of the stored message, terminator included."""

ERROR_STATE_FILE_MAX_LENGTH = (
    ERROR_MESSAGE_MAX_LENGTH
    - ERROR_STATE_MESSAGE_MAX_LENGTH
    - ERROR_FORMATTING_CHARACTERS
    - ERROR_STATE_LINE_NUMBER_STR_MAX_LENGTH
    - 1
)
"""Size of the stored file name, terminator included."""

_ERROR_NOT_SET = "error not set"
_MAX_LINE_NUMBER = 2**64 - 1


class RcutilsError(Exception):
    """Base class of the errors raised by this package."""


class InvalidArgumentError(RcutilsError, ValueError):
    """An argument was missing or out of range."""


class BadAllocError(RcutilsError, MemoryError):
    """Memory could not be obtained from an allocator."""


def _report(text: str) -> None:
    sys.stderr.write(text)
    sys.stderr.flush()


def _copy_string(src: str, dst_size: int) -> str:
    """Return ``src`` cut to fit a buffer of ``dst_size`` with its terminator."""
    if len(src) >= dst_size:
        _report(
            "[rcutil|errors] an error string (message, file name, or formatted "
            "message) will be truncated\n"
        )
        return src[: dst_size - 1]
    return src


@dataclass(frozen=True)
class ErrorState:
    """A recorded error: its message and where it was raised."""

    message: str = ""
    file: str = ""
    line_number: int = 0

    def format(self) -> str:
        """Return the error as ``"<message>, at <file>:<line>"``."""
        message = _copy_string(self.message, ERROR_STATE_MESSAGE_MAX_LENGTH)
        file = _copy_string(self.file, ERROR_STATE_FILE_MAX_LENGTH)
        formatted = f"{message}, at {file}:{self.line_number}"
        return _copy_string(formatted, ERROR_MESSAGE_MAX_LENGTH)


class _ThreadState(threading.local):
    def __init__(self) -> None:
        self.initialized = False
        self.state = ErrorState()
        self.string_is_formatted = False
        self.string = ""
        self.is_set = False


_tls = _ThreadState()


def _overwrite_message(new_state: ErrorState) -> str:
    old_string = _copy_string(get_error_string(), ERROR_MESSAGE_MAX_LENGTH)
    new_string = new_state.format()
    return (
        "\n"
        ">>> [rcutil|errors] set_error_state()\n"
        "This error state is being overwritten:\n"
        "\n"
        f"  '{old_string}'\n"
        "\n"
        "with this new error message:\n"
        "\n"
        f"  '{new_string}'\n"
        "\n"
        "reset_error() should be called after error handling to avoid this.\n"
        "<<<\n"
    )


def set_error_state(error_string: str, file: str, line_number: int) -> None:
    """Record an error for the calling thread.

    A warning goes to stderr when a different error is already recorded.
    """
    if error_string is None:
        raise InvalidArgumentError("error_string must not be None, error was not set")
    if file is None:
        raise InvalidArgumentError("file must not be None, error was not set")
    if not 0 <= line_number <= _MAX_LINE_NUMBER:
        raise InvalidArgumentError("line_number must be a non-negative 64-bit value")

    new_state = ErrorState(
        message=_copy_string(error_string, ERROR_STATE_MESSAGE_MAX_LENGTH),
        file=_copy_string(file, ERROR_STATE_FILE_MAX_LENGTH),
        line_number=line_number,
    )
    prefix = error_string[: ERROR_MESSAGE_MAX_LENGTH]
    if (
        _tls.is_set
        and not _tls.string.startswith(prefix)
        and not _tls.state.message.startswith(prefix)
    ):
        _report(_overwrite_message(new_state))

    _tls.state = new_state
    _tls.string_is_formatted = False
    _tls.string = ""
    _tls.is_set = True


def error_is_set() -> bool:
    """Return whether the calling thread has an error recorded."""
    return _tls.is_set


def get_error_state() -> ErrorState:
    """Return the calling thread's error state; empty when none is set."""
    return _tls.state


def get_error_string() -> str:
    """Return the formatted error, or ``"error not set"``."""
    if not _tls.is_set:
        return _ERROR_NOT_SET
    if not _tls.string_is_formatted:
        _tls.string = _tls.state.format()
        _tls.string_is_formatted = True
    return _tls.string


def reset_error() -> None:
    """Clear the calling thread's error state."""
    _tls.state = ErrorState()
    _tls.string_is_formatted = False
    _tls.string = ""
    _tls.is_set = False


def initialize_error_handling_thread_local_storage(allocator) -> None:
    """Prepare the calling thread's error storage.

    Does nothing when already done for this thread; raises
    :class:`InvalidArgumentError` for an invalid allocator.
    """
    if _tls.initialized:
        return
    if allocator is None or not allocator.is_valid():
        raise InvalidArgumentError(
            "initialize_error_handling_thread_local_storage() given invalid allocator"
        )
    _tls.initialized = True
    reset_error()
    set_error_state("no error - initializing thread-local storage", __file__, 0)
    get_error_string()
    reset_error()