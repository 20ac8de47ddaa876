"""Disjoint-set union with path compression, union by rank and set sizes."""

from __future__ import annotations


class UnionFind:
    """A partition of the items ``0 .. size - 1`` into disjoint sets."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size cannot be negative")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._size = [1] * size
        self._count = size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} is out of range")

    def find(self, item: int) -> int:
        """Representative of the set holding ``item``, compressing the path to it."""
        self._check(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def same_set(self, first: int, second: int) -> bool:
        """Whether ``first`` and ``second`` belong to the same set."""
        return self.find(first) == self.find(second)

    def set_size(self, item: int) -> int:
        """Number of items in the set holding ``item``."""
        return self._size[self.find(item)]

    def set_count(self) -> int:
        """Number of disjoint sets currently kept."""
        return self._count

    def union(self, first: int, second: int) -> bool:
        """Merge the sets of ``first`` and ``second``; False if they were already one."""
        x, y = self.find(first), self.find(second)
        if x == y:
            return False
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        self._size[y] += self._size[x]
        self._count -= 1
        return True