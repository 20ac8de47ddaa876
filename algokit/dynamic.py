"""Dynamic programming: knapsack, egg dropping, subset sums, LCS, rain water and TSP."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise, permutations


def knapsack_01(
    profits: Sequence[int], weights: Sequence[int], capacity: int
) -> int:
    """Largest total profit of items, each taken at most once, within ``capacity``."""
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights cannot be negative")
    if capacity <= 0 or not profits:
        return 0
    best = [0] * (capacity + 1)
    for profit, weight in zip(profits, weights):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + profit)
    return best[capacity]


def egg_drop(eggs: int, floors: int) -> int:
    """Fewest drops that always find the critical floor with ``eggs`` eggs."""
    if eggs < 1:
        raise ValueError("at least one egg is required")
    if floors < 0:
        raise ValueError("the number of floors cannot be negative")
    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0] * (floors + 1)
        for floor in range(1, floors + 1):
            current[floor] = 1 + min(
                max(previous[drop - 1], current[floor - drop])
                for drop in range(1, floor + 1)
            )
        previous = current
    return previous[floors]


def subset_sum(values: Iterable[int], target: int) -> bool:
    """Whether some subset of the non-negative ``values`` adds up to ``target``."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values cannot be negative")
    if target < 0:
        return False
    reachable = [True] + [False] * target
    for value in items:
        for total in range(target, value - 1, -1):
            if reachable[total - value]:
                reachable[total] = True
    return reachable[target]


def can_partition(values: Iterable[int]) -> bool:
    """Whether the values split into two groups with equal sums."""
    items = list(values)
    total = sum(items)
    if total % 2:
        return False
    return subset_sum(items, total // 2)


def _lcs_table(first: Sequence, second: Sequence) -> list[list[int]]:
    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i, a in enumerate(first, start=1):
        for j, b in enumerate(second, start=1):
            if a == b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def longest_common_subsequence(first: str, second: str) -> str:
    """One longest string that is a subsequence of both inputs."""
    table = _lcs_table(first, second)
    chars: list[str] = []
    i, j = len(first), len(second)
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            chars.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))


def min_insertions_palindrome(text: str) -> int:
    """Fewest characters to insert so that ``text`` reads the same both ways."""
    return len(text) - _lcs_table(text, text[::-1])[len(text)][len(text)]


def trapped_water(heights: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    result = 0
    left_max = right_max = 0
    lo, hi = 0, len(heights) - 1
    while lo <= hi:
        if heights[lo] < heights[hi]:
            if heights[lo] > left_max:
                left_max = heights[lo]
            else:
                result += left_max - heights[lo]
            lo += 1
        else:
            if heights[hi] > right_max:
                right_max = heights[hi]
            else:
                result += right_max - heights[hi]
            hi -= 1
    return result


def travelling_salesman(graph: Sequence[Sequence[int]], start: int = 0) -> int:
    """Cost of the cheapest tour from ``start`` through every vertex and back."""
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("the cost matrix must be square")
    if not 0 <= start < size:
        raise ValueError("start vertex is out of range")
    others = [vertex for vertex in range(size) if vertex != start]
    return min(
        sum(graph[a][b] for a, b in pairwise((start, *order, start)))
        for order in permutations(others)
    )