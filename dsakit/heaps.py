"""Problems solved with binary heaps."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence


def approx_k_sort(values: Iterable[int], k: int) -> list[int]:
    """Sort values each at most ``k`` places from their sorted position."""
    heap: list[int] = []
    result: list[int] = []
    for value in values:
        heapq.heappush(heap, value)
        if len(heap) > k:
            result.append(heapq.heappop(heap))
    while heap:
        result.append(heapq.heappop(heap))
    return result


def top_k_frequent(values: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, least frequent of them first."""
    heap: list[tuple[int, int]] = []
    for value, freq in Counter(values).items():
        heapq.heappush(heap, (freq, value))
        if len(heap) > k:
            heapq.heappop(heap)
    return [heapq.heappop(heap)[1] for _ in range(len(heap))]


def k_closest(points: Iterable[Sequence[int]], k: int) -> list[list[int]]:
    """Return the ``k`` points closest to the origin, farthest of them first."""
    keyed = ((p[0] * p[0] + p[1] * p[1], tuple(p)) for p in points)
    nearest = heapq.nsmallest(k, keyed) if k > 0 else []
    return [list(point) for _, point in reversed(nearest)]


def last_stone_weight(stones: Iterable[int]) -> int:
    """Smash the two heaviest stones until at most one is left; return its weight."""
    heap = [-s for s in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        x = -heapq.heappop(heap)
        y = -heapq.heappop(heap)
        if x != y:
            heapq.heappush(heap, -(x - y))
    return -heap[0] if heap else 0


def last_stone_weight_sorted(stones: Iterable[int]) -> int:
    """Same as :func:`last_stone_weight`, re-sorting the pile each round."""
    pile = list(stones)
    while len(pile) > 1:
        pile.sort()
        x = pile.pop()
        y = pile.pop()
        if x != y:
            pile.append(x - y)
    return pile[0] if pile else 0


def min_rope_cost(ropes: Iterable[int]) -> int:
    """Return the least total cost of joining all ropes, each join costing the sum."""
    heap = list(ropes)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        joined = heapq.heappop(heap) + heapq.heappop(heap)
        cost += joined
        heapq.heappush(heap, joined)
    return cost


def kth_smallest(values: Iterable[int], k: int) -> int:
    """Return the k-th smallest value, or the largest when ``k`` exceeds the count."""
    if k < 1:
        raise ValueError("k must be at least 1")
    heap: list[int] = []
    for value in values:
        heapq.heappush(heap, -value)
        if len(heap) > k:
            heapq.heappop(heap)
    if not heap:
        raise ValueError("no values given")
    return -heap[0]