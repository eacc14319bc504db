"""File system queries and path helpers."""

from __future__ import annotations

import os
import stat

from .errors import InvalidArgumentError
from .strings import repl_str

PATH_DELIMITER = os.sep


def _mode(path) -> int | None:
    try:
        return os.stat(path).st_mode
    except (OSError, ValueError):
        return None


def get_cwd() -> str:
    """Return the current working directory."""
    return os.getcwd()


def is_directory(path) -> bool:
    """Return whether ``path`` names a directory."""
    mode = _mode(path)
    return mode is not None and stat.S_ISDIR(mode)


def is_file(path) -> bool:
    """Return whether ``path`` names a regular file."""
    mode = _mode(path)
    return mode is not None and stat.S_ISREG(mode)


def exists(path) -> bool:
    """Return whether ``path`` can be stat'ed."""
    return _mode(path) is not None


def is_readable(path) -> bool:
    """Return whether ``path`` exists with the owner read bit set."""
    mode = _mode(path)
    return mode is not None and bool(mode & stat.S_IRUSR)


def is_writable(path) -> bool:
    """Return whether ``path`` exists with the owner write bit set."""
    mode = _mode(path)
    return mode is not None and bool(mode & stat.S_IWUSR)


def is_readable_and_writable(path) -> bool:
    """Return whether ``path`` exists with both owner read and write bits set."""
    mode = _mode(path)
    return mode is not None and bool(mode & stat.S_IRUSR) and bool(mode & stat.S_IWUSR)


def join_path(left: str, right: str) -> str:
    """Join two paths with the platform's separator."""
    if left is None or right is None:
        raise InvalidArgumentError("paths must not be None")
    return f"{left}{PATH_DELIMITER}{right}"


def to_native_path(path: str) -> str:
    """Replace every ``/`` in ``path`` with the platform's separator."""
    if path is None:
        raise InvalidArgumentError("path must not be None")
    return repl_str(path, "/", PATH_DELIMITER)