import struct

import pytest

from rcutil.allocator import Allocator, get_default_allocator, get_zero_initialized_allocator
from rcutil.array_list import ArrayList
from rcutil.errors import BadAllocError, InvalidArgumentError


def _failing_allocator():
    default = get_default_allocator()
    return Allocator(
        allocate=lambda size, state: None,
        deallocate=default.deallocate,
        reallocate=lambda buffer, size, state: None,
        zero_allocate=lambda n, size, state: None,
    )


def _no_realloc_allocator():
    default = get_default_allocator()
    return Allocator(
        allocate=default.allocate,
        deallocate=default.deallocate,
        reallocate=lambda buffer, size, state: None,
        zero_allocate=default.zero_allocate,
    )


def _u32(value):
    return struct.pack("<I", value)


def test_add_and_get_round_trip():
    lst = ArrayList(2, 4, get_default_allocator())
    values = [7, 8, 9, 10, 11]
    for value in values:
        lst.add(_u32(value))
    assert len(lst) == len(values)
    assert [struct.unpack("<I", lst.get(i))[0] for i in range(len(values))] == values
    assert lst.capacity >= len(lst)


def test_capacity_doubles_when_full():
    lst = ArrayList(2, 4)
    lst.add(_u32(1))
    lst.add(_u32(2))
    assert lst.capacity == 2
    lst.add(_u32(3))
    assert lst.capacity == 4


def test_iteration_yields_records_in_order():
    lst = ArrayList(1, 2)
    records = [b"ab", b"cd", b"ef"]
    for record in records:
        lst.add(record)
    assert list(lst) == records


def test_set_overwrites_record():
    lst = ArrayList(4, 4)
    lst.add(_u32(1))
    lst.add(_u32(2))
    lst.set(1, _u32(99))
    assert lst.get(1) == _u32(99)
    assert lst.get(0) == _u32(1)


def test_remove_shifts_later_records():
    lst = ArrayList(4, 4)
    for value in (1, 2, 3, 4):
        lst.add(_u32(value))
    lst.remove(1)
    assert list(lst) == [_u32(1), _u32(3), _u32(4)]
    lst.remove(2)
    assert list(lst) == [_u32(1), _u32(3)]


def test_longer_data_is_cut_to_record_size():
    lst = ArrayList(1, 2)
    lst.add(b"xyz")
    assert lst.get(0) == b"xy"


def test_short_data_is_rejected():
    lst = ArrayList(1, 4)
    with pytest.raises(InvalidArgumentError):
        lst.add(b"ab")


def test_none_data_is_rejected():
    lst = ArrayList(1, 4)
    with pytest.raises(InvalidArgumentError):
        lst.add(None)
    lst.add(_u32(5))
    with pytest.raises(InvalidArgumentError):
        lst.set(0, None)


@pytest.mark.parametrize("index", [0, 1, -1])
def test_out_of_bounds_index(index):
    lst = ArrayList(2, 4)
    if index == 0:
        with pytest.raises(InvalidArgumentError):
            lst.get(index)
    else:
        lst.add(_u32(1))
        with pytest.raises(InvalidArgumentError):
            lst.get(index)
        with pytest.raises(InvalidArgumentError):
            lst.set(index, _u32(2))
        with pytest.raises(InvalidArgumentError):
            lst.remove(index)


@pytest.mark.parametrize("capacity,data_size", [(0, 4), (2, 0)])
def test_init_rejects_sizes_below_one(capacity, data_size):
    with pytest.raises(InvalidArgumentError):
        ArrayList(capacity, data_size, get_default_allocator())


def test_init_rejects_invalid_allocator():
    with pytest.raises(InvalidArgumentError):
        ArrayList(2, 4, get_zero_initialized_allocator())


def test_init_reports_failed_allocation():
    with pytest.raises(BadAllocError):
        ArrayList(2, 4, _failing_allocator())


def test_failed_growth_leaves_list_intact():
    lst = ArrayList(1, 4, _no_realloc_allocator())
    lst.add(_u32(1))
    with pytest.raises(BadAllocError):
        lst.add(_u32(2))
    assert len(lst) == 1
    assert lst.get(0) == _u32(1)


def test_closed_list_cannot_be_used():
    lst = ArrayList(2, 4)
    lst.close()
    with pytest.raises(InvalidArgumentError):
        len(lst)
    with pytest.raises(InvalidArgumentError):
        lst.add(_u32(1))
    with pytest.raises(InvalidArgumentError):
        lst.close()


def test_context_manager_closes():
    with ArrayList(2, 4) as lst:
        lst.add(_u32(3))
        assert lst.get(0) == _u32(3)
    with pytest.raises(InvalidArgumentError):
        lst.get(0)