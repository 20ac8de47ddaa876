"""Maximum flow with the Ford-Fulkerson method using breadth-first augmenting paths."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence


def _augmenting_path(
    residual: list[list[int]], source: int, sink: int
) -> tuple[int, list[int | None]]:
    size = len(residual)
    parent: list[int | None] = [None] * size
    seen = [False] * size
    seen[source] = True
    queue: deque[tuple[int, float]] = deque([(source, math.inf)])
    while queue:
        node, capacity = queue.popleft()
        for dest in range(size):
            if dest != node and not seen[dest] and residual[node][dest] != 0:
                seen[dest] = True
                parent[dest] = node
                bottleneck = min(capacity, residual[node][dest])
                if dest == sink:
                    return int(bottleneck), parent
                queue.append((dest, bottleneck))
    return 0, parent


def max_flow(
    capacities: Sequence[Sequence[int]], source: int, sink: int
) -> tuple[int, list[list[int]]]:
    """Maximum flow from ``source`` to ``sink`` and the augmenting paths used.

    ``capacities`` is a square matrix of edge capacities. Each path runs from
    ``source`` to ``sink`` in the order the paths were found.
    """
    size = len(capacities)
    if any(len(row) != size for row in capacities):
        raise ValueError("the capacity matrix must be square")
    if not (0 <= source < size and 0 <= sink < size):
        raise ValueError("source or sink is out of range")
    if any(value < 0 for row in capacities for value in row):
        raise ValueError("capacities cannot be negative")
    residual = [list(row) for row in capacities]
    total = 0
    paths: list[list[int]] = []
    while True:
        bottleneck, parent = _augmenting_path(residual, source, sink)
        if not bottleneck:
            break
        total += bottleneck
        path = [sink]
        node = sink
        while node != source:
            previous = parent[node]
            assert previous is not None
            residual[node][previous] += bottleneck
            residual[previous][node] -= bottleneck
            node = previous
            path.append(node)
        paths.append(path[::-1])
    return total, paths