"""Greedy algorithms: activity selection, fractional knapsack, job sequencing, file merging."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass


def max_activities(intervals: Iterable[tuple[int, int]]) -> int:
    """Most non-overlapping (start, end) activities one person can attend."""
    count = 0
    finish: int | None = None
    for start, end in sorted(intervals, key=lambda interval: interval[1]):
        if finish is None or start >= finish:
            finish = end
            count += 1
    return count


def fractional_knapsack(
    items: Iterable[tuple[float, float]], capacity: float
) -> float:
    """Largest profit from (profit, weight) items when fractions of items may be taken."""
    goods = list(items)
    if any(weight <= 0 for _, weight in goods):
        raise ValueError("weights must be positive")
    total = 0.0
    for profit, weight in sorted(goods, key=lambda item: item[0] / item[1], reverse=True):
        if weight <= capacity:
            total += profit
            capacity -= weight
        elif capacity > 0:
            total += profit * capacity / weight
            capacity = 0
    return total


@dataclass(frozen=True)
class Job:
    """A unit-time job with a label, a deadline and the profit it earns."""

    number: int
    deadline: int
    profit: int


def schedule_jobs(jobs: Iterable[Job]) -> tuple[list[Job], int]:
    """Jobs placed in time-slot order to maximise profit, and that total profit."""
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    slots: list[Job | None] = [None] * len(ordered)
    total = 0
    for job in ordered:
        for slot in range(min(len(slots), job.deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                total += job.profit
                break
    return [job for job in slots if job is not None], total


def optimal_merge_cost(sizes: Iterable[int]) -> int:
    """Least total work to merge files pairwise, always merging the two smallest."""
    heap = list(sizes)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total