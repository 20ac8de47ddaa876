"""Array algorithms: sliding windows, subarray sums, peaks, prefix sums and matrices."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations


def first_negative_in_windows(values: Iterable[int], k: int) -> list[int]:
    """Return the first negative number of every window of size ``k``, or 0 if none."""
    items = list(values)
    if not 0 < k <= len(items):
        raise ValueError("window size must be between 1 and the number of values")
    negatives: deque[int] = deque()
    result: list[int] = []
    for index, value in enumerate(items):
        if negatives and index - negatives[0] >= k:
            negatives.popleft()
        if value < 0:
            negatives.append(index)
        if index >= k - 1:
            result.append(items[negatives[0]] if negatives else 0)
    return result


def _require_values(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def max_subarray_sum_brute(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run, by summing every run."""
    items = _require_values(values)
    return max(
        sum(items[start:stop])
        for start, stop in combinations(range(len(items) + 1), 2)
    )


def max_subarray_sum_prefix(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run, using cumulative sums."""
    items = _require_values(values)
    prefix = list(accumulate(items, initial=0))
    return max(
        prefix[stop] - prefix[start]
        for start, stop in combinations(range(len(prefix)), 2)
    )


def max_subarray_sum_kadane(values: Iterable[int]) -> int:
    """Kadane's scan; the running sum is reset at zero, so the result is never negative."""
    items = _require_values(values)
    current = 0
    best: int | None = None
    for value in items:
        current = max(current + value, 0)
        best = current if best is None else max(best, current)
    assert best is not None
    return best


def find_peak(values: Sequence[int]) -> int:
    """Index of an element not smaller than its neighbours, found by binary search."""
    n = len(values)
    if n == 0:
        raise ValueError("cannot find a peak in an empty sequence")
    if n == 1:
        return 0
    start, end = 0, n - 1
    mid = 0
    while end >= start:
        mid = (start + end) // 2
        if mid == 0:
            if values[mid] >= values[mid + 1]:
                break
            start = mid + 1
        elif mid == n - 1:
            if values[mid] >= values[mid - 1]:
                break
            end = mid - 1
        elif values[mid] >= values[mid - 1] and values[mid] >= values[mid + 1]:
            break
        elif values[mid] < values[mid - 1]:
            end = mid - 1
        else:
            start = mid + 1
    return mid


class PrefixSums:
    """Answers inclusive range-sum queries with 1-based positions in constant time."""

    def __init__(self, values: Iterable[int]) -> None:
        self._prefix = list(accumulate(values, initial=0))

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def range_sum(self, left: int, right: int) -> int:
        """Sum of the values at positions ``left`` to ``right``, both inclusive."""
        if not 1 <= left <= right <= len(self):
            raise IndexError(f"invalid range {left}..{right} for {len(self)} values")
        return self._prefix[right] - self._prefix[left - 1]


def sort_012(values: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in one pass (Dutch national flag)."""
    items = list(values)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def _require_square(matrix: Sequence[Sequence[float]]) -> None:
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("invalid matrix: it must be square")


def matrix_trace(matrix: Sequence[Sequence[float]]) -> float:
    """Sum of the main diagonal of a square matrix."""
    _require_square(matrix)
    return sum(row[index] for index, row in enumerate(matrix))


def matrix_normal(matrix: Sequence[Sequence[float]]) -> float:
    """Square root of the sum of all elements of a square matrix."""
    _require_square(matrix)
    total = sum(sum(row) for row in matrix)
    if total < 0:
        raise ValueError("the elements sum to a negative number")
    return math.sqrt(total)