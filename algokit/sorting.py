"""Classic comparison and counting sorts, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate

COUNTING_SORT_RANGE = 256


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent elements that are out of order."""
    items = list(values)
    n = len(items)
    for passes in range(1, n):
        for i in range(n - passes):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort for integers in the range 0..255."""
    items = list(values)
    counts = [0] * COUNTING_SORT_RANGE
    for value in items:
        if not 0 <= value < COUNTING_SORT_RANGE:
            raise ValueError(
                f"{value!r} is outside the range 0..{COUNTING_SORT_RANGE - 1}"
            )
        counts[value] += 1
    positions = list(accumulate(counts))
    output = [0] * len(items)
    for value in reversed(items):
        positions[value] -= 1
        output[positions[value]] = value
    return output


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _hoare_partition(items: list[int], low: int, high: int) -> int:
    pivot = items[low]
    left, right = low, high
    while left < right:
        while items[left] <= pivot and left < high:
            left += 1
        while right > low and items[right] > pivot:
            right -= 1
        if left < right:
            items[left], items[right] = items[right], items[left]
    items[low], items[right] = items[right], items[low]
    return right


def quick_sort_hoare(values: Iterable[int]) -> list[int]:
    """Quicksort with the first element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _hoare_partition(items, low, high)
        pending.append((low, pivot - 1))
        pending.append((pivot + 1, high))
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining element to the front of each position."""
    items = list(values)
    n = len(items)
    for i in range(n):
        for j in range(i + 1, n):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items