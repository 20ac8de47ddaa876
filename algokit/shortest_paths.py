"""Shortest paths: Bellman-Ford, Dijkstra and Floyd-Warshall."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable, Iterable, Sequence
from itertools import count

from algokit.graphs import WeightedGraph


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def bellman_ford(
    vertex_count: int, edges: Iterable[tuple[int, int, float]]
) -> list[float]:
    """Distances from vertex 0 over directed (source, target, weight) edges.

    Unreachable vertices get ``math.inf``; a reachable negative cycle raises
    :class:`NegativeCycleError`.
    """
    if vertex_count < 1:
        raise ValueError("at least one vertex is required")
    edge_list = list(edges)
    for u, v, _ in edge_list:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) has a vertex out of range")
    distance = [math.inf] * vertex_count
    distance[0] = 0
    updated = False
    for _ in range(vertex_count - 1):
        updated = False
        for u, v, weight in edge_list:
            if distance[u] != math.inf and distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
                updated = True
        if not updated:
            break
    if updated and any(
        distance[u] != math.inf and distance[u] + weight < distance[v]
        for u, v, weight in edge_list
    ):
        raise NegativeCycleError("graph has a negative weight cycle")
    return distance


def dijkstra(graph: WeightedGraph, source: Hashable) -> dict[Hashable, float]:
    """Distance from ``source`` to every node of ``graph``; unreachable nodes get inf."""
    nodes = graph.nodes()
    if source not in nodes:
        raise ValueError(f"{source!r} is not a node of the graph")
    distance: dict[Hashable, float] = {node: math.inf for node in nodes}
    distance[source] = 0
    tie = count()
    heap = [(0, next(tie), source)]
    while heap:
        dist, _, node = heapq.heappop(heap)
        if dist > distance[node]:
            continue
        for target, weight in graph.neighbours(node):
            candidate = dist + weight
            if candidate < distance[target]:
                distance[target] = candidate
                heapq.heappush(heap, (candidate, next(tie), target))
    return distance


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances; ``math.inf`` marks a missing edge."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the distance matrix must be square")
    dist = [list(row) for row in matrix]
    for k in range(size):
        through = dist[k]
        for row in dist:
            via = row[k]
            for j in range(size):
                if row[j] > via + through[j]:
                    row[j] = via + through[j]
    return dist