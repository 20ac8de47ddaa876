"""Searching in sequences: binary-search bounds on sorted data and linear search."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence


def contains_sorted(values: Sequence[int], key: int) -> bool:
    """Whether ``key`` occurs in the sorted sequence."""
    index = bisect_left(values, key)
    return index < len(values) and values[index] == key


def lower_bound(values: Sequence[int], key: int) -> int:
    """Index of the first element not less than ``key``."""
    return bisect_left(values, key)


def upper_bound(values: Sequence[int], key: int) -> int:
    """Index of the first element strictly greater than ``key``."""
    return bisect_right(values, key)


def count_sorted(values: Sequence[int], key: int) -> int:
    """Number of occurrences of ``key`` in the sorted sequence."""
    return upper_bound(values, key) - lower_bound(values, key)


def linear_search(values: Iterable[int], key: int) -> int | None:
    """Index of the first occurrence of ``key``, or None if it is absent."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return None