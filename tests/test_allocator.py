from dataclasses import replace

import pytest

from rcutil.allocator import (
    Allocator,
    get_default_allocator,
    get_zero_initialized_allocator,
    reallocf,
)
from rcutil.errors import BadAllocError, InvalidArgumentError


def test_default_allocator_is_valid():
    assert get_default_allocator().is_valid() is True


def test_zero_initialized_allocator_is_invalid():
    assert get_zero_initialized_allocator().is_valid() is False


@pytest.mark.parametrize("missing", ["allocate", "deallocate", "reallocate", "zero_allocate"])
def test_allocator_missing_function_is_invalid(missing):
    partial = replace(get_default_allocator(), **{missing: None})
    assert partial.is_valid() is False


def test_default_allocate_size():
    allocator = get_default_allocator()
    buffer = allocator.allocate(16, allocator.state)
    assert len(buffer) == 16


def test_default_zero_allocate_is_zeroed():
    allocator = get_default_allocator()
    buffer = allocator.zero_allocate(4, 8, allocator.state)
    assert len(buffer) == 32
    assert not any(buffer)


def test_reallocf_grows_and_keeps_content():
    allocator = get_default_allocator()
    buffer = bytearray(b"abcd")
    grown = reallocf(buffer, 8, allocator)
    assert len(grown) == 8
    assert bytes(grown[:4]) == b"abcd"


def test_reallocf_shrinks_and_keeps_prefix():
    allocator = get_default_allocator()
    shrunk = reallocf(bytearray(b"abcdef"), 3, allocator)
    assert bytes(shrunk) == b"abc"


def test_reallocf_from_none_allocates():
    allocator = get_default_allocator()
    assert len(reallocf(None, 5, allocator)) == 5


def test_reallocf_invalid_allocator_raises():
    with pytest.raises(InvalidArgumentError):
        reallocf(bytearray(4), 8, get_zero_initialized_allocator())


def test_reallocf_failure_deallocates_and_raises():
    released = []
    failing = Allocator(
        allocate=lambda size, state: None,
        deallocate=lambda buffer, state: released.append(buffer),
        reallocate=lambda buffer, size, state: None,
        zero_allocate=lambda n, size, state: None,
    )
    original = bytearray(b"data")
    with pytest.raises(BadAllocError):
        reallocf(original, 10, failing)
    assert released == [original]
    assert released[0] is original


def test_state_passed_to_functions():
    seen = []
    allocator = replace(
        get_default_allocator(),
        reallocate=lambda buffer, size, state: seen.append(state) or bytearray(size),
        state="ctx",
    )
    result = reallocf(None, 2, allocator)
    assert bytes(result) == b"\x00\x00"
    assert seen == ["ctx"]