"""Monotonic-stack problems: nearest greater/smaller elements and friends."""

from __future__ import annotations

from collections.abc import Sequence

NONE_FOUND = -1


def next_greater(values: Sequence[int]) -> list[int]:
    """For each item, the first later value strictly greater, or -1."""
    result = [NONE_FOUND] * len(values)
    stack: list[int] = []
    for i in range(len(values) - 1, -1, -1):
        while stack and stack[-1] <= values[i]:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(values[i])
    return result


def previous_greater(values: Sequence[int]) -> list[int]:
    """For each item, the nearest earlier value strictly greater, or -1."""
    result = [NONE_FOUND] * len(values)
    stack: list[int] = []
    for i, value in enumerate(values):
        while stack and stack[-1] <= value:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(value)
    return result


def next_smaller(values: Sequence[int]) -> list[int]:
    """For each item, the first later value strictly smaller, or -1."""
    result = [NONE_FOUND] * len(values)
    stack: list[int] = []
    for i in range(len(values) - 1, -1, -1):
        while stack and stack[-1] >= values[i]:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(values[i])
    return result


def previous_smaller(values: Sequence[int]) -> list[int]:
    """For each item, the nearest earlier value strictly smaller, or -1."""
    result = [NONE_FOUND] * len(values)
    stack: list[int] = []
    for i, value in enumerate(values):
        while stack and stack[-1] >= value:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(value)
    return result


def next_smaller_index(values: Sequence[int]) -> list[int]:
    """For each item, the index of the first later smaller value, or ``len(values)``."""
    n = len(values)
    result = [n] * n
    stack: list[int] = []
    for i in range(n - 1, -1, -1):
        while stack and values[stack[-1]] >= values[i]:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def previous_smaller_index(values: Sequence[int]) -> list[int]:
    """For each item, the index of the nearest earlier smaller value, or -1."""
    result = [NONE_FOUND] * len(values)
    stack: list[int] = []
    for i, value in enumerate(values):
        while stack and values[stack[-1]] >= value:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def largest_rectangle(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle inside a histogram."""
    after = next_smaller_index(heights)
    before = previous_smaller_index(heights)
    return max(
        ((right - left - 1) * h for h, left, right in zip(heights, before, after)),
        default=0,
    )


def max_sliding_window(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive items."""
    if k < 1:
        raise ValueError("k must be at least 1")
    n = len(values)
    if n == 0:
        return []
    # Index of the next item not smaller than each one.
    jump = [n] * n
    stack: list[int] = []
    for i in range(n - 1, -1, -1):
        while stack and values[stack[-1]] < values[i]:
            stack.pop()
        if stack:
            jump[i] = stack[-1]
        stack.append(i)

    result: list[int] = []
    j = 0
    for start in range(n - k + 1):
        j = max(j, start)
        while jump[j] < start + k:
            j = jump[j]
        result.append(values[j])
    return result


def can_see_persons_count(heights: Sequence[int]) -> list[int]:
    """For each person in a queue, how many people to the right they can see."""
    result = [0] * len(heights)
    stack: list[int] = []
    for i in range(len(heights) - 1, -1, -1):
        while stack and heights[stack[-1]] < heights[i]:
            stack.pop()
            result[i] += 1
        if stack:
            result[i] += 1
        stack.append(i)
    return result


def previous_greater_index(values: Sequence[int]) -> list[int]:
    """For each item, the index of the nearest earlier strictly greater value, or -1."""
    result = [NONE_FOUND] * len(values)
    stack: list[int] = []
    for i, value in enumerate(values):
        while stack and values[stack[-1]] <= value:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, how many consecutive days up to it had a price no higher."""
    return [i - prev for i, prev in enumerate(previous_greater_index(prices))]