"""Graph representations and classic searches: traversal, colouring, cut vertices, cycles."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Any


class WeightedGraph:
    """An adjacency-list graph of hashable nodes with weighted edges."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[tuple[Hashable, Any]]] = {}

    def add_edge(
        self,
        source: Hashable,
        target: Hashable,
        weight: Any,
        bidirectional: bool = True,
    ) -> None:
        """Add an edge from ``source`` to ``target``, and back if ``bidirectional``."""
        self._adjacency.setdefault(source, []).append((target, weight))
        targets = self._adjacency.setdefault(target, [])
        if bidirectional:
            targets.append((source, weight))

    def neighbours(self, node: Hashable) -> list[tuple[Hashable, Any]]:
        """The (node, weight) pairs reachable by one edge from ``node``."""
        return list(self._adjacency.get(node, ()))

    def nodes(self) -> list[Hashable]:
        """All nodes in the order they first appeared."""
        return list(self._adjacency)

    def describe(self) -> list[str]:
        """One line per node, such as ``"A->(B,20)(C,40)"``."""
        return [
            f"{node}->" + "".join(f"({target},{weight})" for target, weight in edges)
            for node, edges in self._adjacency.items()
        ]


def adjacency_from_edges(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Undirected adjacency lists for vertices ``0 .. vertex_count - 1``."""
    if vertex_count < 0:
        raise ValueError("vertex count cannot be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for a, b in edges:
        if not (0 <= a < vertex_count and 0 <= b < vertex_count):
            raise ValueError(f"edge ({a}, {b}) has a vertex out of range")
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def articulation_points(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[int]:
    """Vertices whose removal disconnects their component (Tarjan), in ascending order."""
    adjacency = adjacency_from_edges(vertex_count, edges)
    disc = [-1] * vertex_count
    low = [0] * vertex_count
    parent = [-1] * vertex_count
    points: set[int] = set()
    timer = 0
    for root in range(vertex_count):
        if disc[root] != -1:
            continue
        disc[root] = low[root] = timer
        timer += 1
        root_children = 0
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]
        while stack:
            u, pending = stack[-1]
            for v in pending:
                if disc[v] == -1:
                    parent[v] = u
                    if u == root:
                        root_children += 1
                    disc[v] = low[v] = timer
                    timer += 1
                    stack.append((v, iter(adjacency[v])))
                    break
                if v != parent[u]:
                    low[u] = min(low[u], disc[v])
            else:
                stack.pop()
                if stack:
                    p = stack[-1][0]
                    low[p] = min(low[p], low[u])
                    if p != root and low[u] >= disc[p]:
                        points.add(p)
        if root_children > 1:
            points.add(root)
    return sorted(points)


def greedy_coloring(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> tuple[int, list[int]]:
    """Colour vertices in order with the smallest colour free among their neighbours.

    Returns the number of colours used and the colour of each vertex.
    """
    adjacency = adjacency_from_edges(vertex_count, edges)
    colors = [-1] * vertex_count
    for vertex in range(vertex_count):
        taken = {colors[n] for n in adjacency[vertex] if colors[n] != -1}
        color = 0
        while color in taken:
            color += 1
        colors[vertex] = color
    return (max(colors) + 1 if colors else 0), colors


def hamiltonian_cycles(
    matrix: Sequence[Sequence[int]], start: int = 0
) -> Iterator[list[int]]:
    """Yield every cycle from ``start`` that visits each vertex once and returns.

    ``matrix`` is an adjacency matrix where a truthy entry marks an edge.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError("start vertex is out of range")

    path = [start]
    visited = {start}

    def extend(vertex: int) -> Iterator[list[int]]:
        if len(path) == size:
            if matrix[vertex][start]:
                yield [*path, start]
            return
        for nbr, connected in enumerate(matrix[vertex]):
            if connected and nbr not in visited:
                visited.add(nbr)
                path.append(nbr)
                yield from extend(nbr)
                path.pop()
                visited.discard(nbr)

    return extend(start)


def is_bipartite(vertex_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the vertices can be 2-coloured so no edge joins equal colours."""
    adjacency = adjacency_from_edges(vertex_count, edges)
    color = [-1] * vertex_count
    for src in range(vertex_count):
        if color[src] != -1:
            continue
        color[src] = 1
        queue = deque([src])
        while queue:
            node = queue.popleft()
            for nbr in adjacency[node]:
                if color[nbr] == -1:
                    color[nbr] = 1 - color[node]
                    queue.append(nbr)
                elif color[nbr] == color[node]:
                    return False
    return True


def _adjacency_map(
    edges: Iterable[tuple[Hashable, Hashable]]
) -> dict[Hashable, list[Hashable]]:
    adjacency: dict[Hashable, list[Hashable]] = {}
    for a, b in edges:
        adjacency.setdefault(a, []).append(b)
        adjacency.setdefault(b, []).append(a)
    return adjacency


def bfs(edges: Iterable[tuple[Hashable, Hashable]], source: Hashable) -> list[Hashable]:
    """Nodes of an undirected graph in breadth-first order from ``source``."""
    adjacency = _adjacency_map(edges)
    order: list[Hashable] = []
    visited = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nbr in adjacency.get(node, ()):
            if nbr not in visited:
                visited.add(nbr)
                queue.append(nbr)
    return order


def dfs(edges: Iterable[tuple[Hashable, Hashable]], source: Hashable) -> list[Hashable]:
    """Nodes of an undirected graph in depth-first preorder from ``source``."""
    adjacency = _adjacency_map(edges)
    order = [source]
    visited = {source}
    stack: list[Iterator[Hashable]] = [iter(adjacency.get(source, ()))]
    while stack:
        for nbr in stack[-1]:
            if nbr not in visited:
                visited.add(nbr)
                order.append(nbr)
                stack.append(iter(adjacency.get(nbr, ())))
                break
        else:
            stack.pop()
    return order