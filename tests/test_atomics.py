import threading

import pytest

from rcutil.atomics import AtomicValue

BASE_TYPES = [bool, int, float]


@pytest.mark.parametrize("base_type", BASE_TYPES)
def test_load_store_exchange(base_type):
    uut = AtomicValue(base_type(0))
    assert uut.load() == base_type(0)

    uut.store(base_type(28))
    exchanged = uut.exchange(base_type(42))
    loaded = uut.load()
    assert exchanged == base_type(28)
    assert loaded == base_type(42)


def test_exchange_with_objects():
    first = [1]
    second = [2]
    uut = AtomicValue(first)
    assert uut.exchange(second) is first
    assert uut.load() is second


def test_compare_exchange_success():
    uut = AtomicValue(5)
    ok, observed = uut.compare_exchange_strong(5, 9)
    assert ok is True
    assert observed == 5
    assert uut.load() == 9


def test_compare_exchange_failure_reports_current():
    uut = AtomicValue(7)
    ok, observed = uut.compare_exchange_strong(5, 9)
    assert ok is False
    assert observed == 7
    assert uut.load() == 7


def test_fetch_add_returns_previous():
    uut = AtomicValue(10)
    assert uut.fetch_add(3) == 10
    assert uut.load() == 13


def test_fetch_add_from_many_threads():
    uut = AtomicValue(0)

    def work():
        for _ in range(1000):
            uut.fetch_add(1)

    threads = [threading.Thread(target=work) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert uut.load() == 8000