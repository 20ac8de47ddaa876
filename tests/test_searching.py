import pytest

from algokit.searching import (
    contains_sorted,
    count_sorted,
    linear_search,
    lower_bound,
    upper_bound,
)

SORTED = [10, 20, 40, 40, 40, 70, 100, 130, 560]
LINEAR = [10, 20, 40, 70, 100]


def test_bounds_of_forty():
    assert lower_bound(SORTED, 40) == 2
    assert upper_bound(SORTED, 40) == 5
    assert count_sorted(SORTED, 40) == 3


@pytest.mark.parametrize("key", SORTED)
def test_contains_every_present_key(key):
    assert contains_sorted(SORTED, key) is True


@pytest.mark.parametrize("key", [0, 15, 41, 600])
def test_does_not_contain_missing_keys(key):
    assert contains_sorted(SORTED, key) is False
    assert count_sorted(SORTED, key) == 0
    assert lower_bound(SORTED, key) == upper_bound(SORTED, key)


@pytest.mark.parametrize("key", [0, 10, 40, 99, 560, 1000])
def test_bound_invariants(key):
    low = lower_bound(SORTED, key)
    high = upper_bound(SORTED, key)
    assert all(v < key for v in SORTED[:low])
    assert all(v >= key for v in SORTED[low:])
    assert all(v <= key for v in SORTED[:high])
    assert all(v > key for v in SORTED[high:])
    assert count_sorted(SORTED, key) == SORTED.count(key)


def test_empty_sequence():
    assert contains_sorted([], 5) is False
    assert lower_bound([], 5) == upper_bound([], 5) == 0


@pytest.mark.parametrize("key", LINEAR)
def test_linear_search_finds_index(key):
    assert LINEAR[linear_search(LINEAR, key)] == key


def test_linear_search_missing():
    assert linear_search(LINEAR, 55) is None


def test_linear_search_first_occurrence():
    assert linear_search(SORTED, 40) == lower_bound(SORTED, 40)