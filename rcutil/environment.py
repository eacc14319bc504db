"""Environment variable lookup and simple command-line option scanning."""

from __future__ import annotations

import os
from typing import Optional, Sequence

from .errors import InvalidArgumentError


def get_env(name: str) -> str:
    """Return the value of environment variable ``name``, or ``""`` when unset."""
    if name is None:
        raise InvalidArgumentError("argument env_name is null")
    return os.environ.get(name, "")


def get_home_dir() -> Optional[str]:
    """Return the user's home directory from the environment, or ``None``."""
    home = get_env("HOME")
    if home:
        return home
    if os.name == "nt":
        profile = get_env("USERPROFILE")
        if profile:
            return profile
    return None


def cli_option_exist(args: Sequence[str], option: str) -> bool:
    """Return whether ``option`` appears exactly among ``args``."""
    return any(arg == option for arg in args)


def cli_get_option(args: Sequence[str], option: str) -> Optional[str]:
    """Return the argument following the first one starting with ``option``.

    Returns ``None`` when no argument matches or the match is the last one.
    """
    for index, arg in enumerate(args):
        if arg.startswith(option):
            if index + 1 < len(args):
                return args[index + 1]
            return None
    return None