"""Minimum spanning trees with Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter

from algokit.dsu import UnionFind


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between two vertices."""

    source: int
    target: int
    weight: int


EdgeLike = Edge | tuple[int, int, int]


def _as_edges(vertex_count: int, edges: Iterable[EdgeLike]) -> list[Edge]:
    if vertex_count < 1:
        raise ValueError("at least one vertex is required")
    result = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in result:
        if not (0 <= edge.source < vertex_count and 0 <= edge.target < vertex_count):
            raise ValueError(
                f"edge ({edge.source}, {edge.target}) has a vertex out of range"
            )
    return result


def kruskal_tree(vertex_count: int, edges: Iterable[EdgeLike]) -> list[Edge]:
    """Edges of a minimum spanning tree, smaller vertex first, in the order chosen."""
    forest = UnionFind(vertex_count) if vertex_count > 0 else None
    candidates = _as_edges(vertex_count, edges)
    assert forest is not None
    tree: list[Edge] = []
    for edge in sorted(candidates, key=attrgetter("weight")):
        if len(tree) == vertex_count - 1:
            break
        if forest.union(edge.source, edge.target):
            low, high = sorted((edge.source, edge.target))
            tree.append(Edge(low, high, edge.weight))
    if len(tree) != vertex_count - 1:
        raise ValueError("the graph is not connected")
    return tree


def kruskal_weight(vertex_count: int, edges: Iterable[EdgeLike]) -> int:
    """Total weight of a minimum spanning forest, found with a disjoint-set union."""
    candidates = _as_edges(vertex_count, edges)
    forest = UnionFind(vertex_count)
    total = 0
    for edge in sorted(candidates, key=attrgetter("weight")):
        if forest.union(edge.source, edge.target):
            total += edge.weight
    return total


def prim_weight(vertex_count: int, edges: Iterable[EdgeLike]) -> int:
    """Total weight of a minimum spanning tree of the component holding vertex 0."""
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for edge in _as_edges(vertex_count, edges):
        adjacency[edge.source].append((edge.target, edge.weight))
        adjacency[edge.target].append((edge.source, edge.weight))
    visited = [False] * vertex_count
    heap = [(0, 0)]
    total = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for target, edge_weight in adjacency[node]:
            if not visited[target]:
                heapq.heappush(heap, (edge_weight, target))
    return total


def prim_parents(matrix: Sequence[Sequence[int]]) -> list[int | None]:
    """Parent of each vertex in a minimum spanning tree rooted at vertex 0.

    ``matrix`` is a weighted adjacency matrix where 0 means no edge; the root's
    parent is None.
    """
    size = len(matrix)
    if size == 0:
        raise ValueError("at least one vertex is required")
    if any(len(row) != size for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    key = [math.inf] * size
    parent: list[int | None] = [None] * size
    in_tree = [False] * size
    key[0] = 0
    for _ in range(size):
        candidates = [v for v in range(size) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("the graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not in_tree[v] and weight < key[v]:
                key[v] = weight
                parent[v] = u
    return parent