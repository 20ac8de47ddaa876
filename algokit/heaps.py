"""Binary max-heaps on lists: sifting, building, heap sort and k-largest selection."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator


def sift_down(values: list[int], size: int, index: int) -> None:
    """Move ``values[index]`` down within the first ``size`` items until the max-heap holds."""
    if not 0 <= size <= len(values):
        raise ValueError("heap size must be between 0 and the length of the list")
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_max_heap(values: Iterable[int]) -> list[int]:
    """Return the values arranged as a max-heap in array form."""
    items = list(values)
    for index in range(len(items) // 2 - 1, -1, -1):
        sift_down(items, len(items), index)
    return items


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted in ascending order using a max-heap."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(items, end, 0)
    return items


def k_largest(values: Iterable[int], k: int) -> list[int]:
    """The ``k`` largest values in descending order, kept with a bounded min-heap."""
    if k < 0:
        raise ValueError("k cannot be negative")
    heap: list[int] = []
    for value in values:
        heapq.heappush(heap, value)
        if len(heap) > k:
            heapq.heappop(heap)
    return sorted(heap, reverse=True)


class MaxHeap:
    """A max-heap supporting insertion, root removal and removal of any value."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items = build_max_heap(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the heap in its array order."""
        return iter(list(self._items))

    def _sift_up(self, index: int) -> None:
        item = self._items[index]
        while index > 0:
            parent = (index - 1) // 2
            if item <= self._items[parent]:
                break
            self._items[index] = self._items[parent]
            index = parent
        self._items[index] = item

    def push(self, key: int) -> None:
        """Insert ``key`` into the heap."""
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def pop_root(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            sift_down(self._items, len(self._items), 0)
        return root

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value``."""
        try:
            index = self._items.index(value)
        except ValueError:
            raise ValueError(f"{value!r} is not in the heap") from None
        last = self._items.pop()
        if index == len(self._items):
            return
        self._items[index] = last
        if index > 0 and last > self._items[(index - 1) // 2]:
            self._sift_up(index)
        else:
            sift_down(self._items, len(self._items), index)