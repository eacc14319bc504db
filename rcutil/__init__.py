"""Utilities: per-thread error state, allocators, growable buffers, string helpers, filesystem checks, environment lookup and atomics."""

__version__ = "0.1.0"