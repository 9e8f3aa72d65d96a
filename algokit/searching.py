"""Searches over integer sequences: binary searches, pivots and index finders.

Functions that look for a position return None when there is none.
"""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from itertools import accumulate


def first_occurrence(values: Sequence[int], key: int) -> int | None:
    """Index of the first occurrence of key in a sorted sequence, or None."""
    index = bisect_left(values, key)
    if index < len(values) and values[index] == key:
        return index
    return None


def last_occurrence(values: Sequence[int], key: int) -> int | None:
    """Index of the last occurrence of key in a sorted sequence, or None."""
    index = bisect_right(values, key) - 1
    if index >= 0 and values[index] == key:
        return index
    return None


def peak_index(values: Sequence[int]) -> int:
    """Index of the peak of a mountain sequence, found by binary search.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("peak_index() of an empty sequence")
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid + 1] > values[mid]:
            start = mid + 1
        else:
            end = mid
    return start


def pivot_index(values: Sequence[int]) -> int | None:
    """Leftmost index whose left sum equals its right sum, or None."""
    right = sum(values)
    left = 0
    for index, value in enumerate(values):
        right -= value
        if left == right:
            return index
        left += value
    return None


def search_adjacent_differ(values: Sequence[int], x: int, k: int) -> int | None:
    """Find x in a sequence whose neighbours differ by at most k, jumping ahead.

    Each step jumps forward by the larger of the current index and the
    number of k-steps separating the current value from x (at least one).
    Raises ValueError when k is zero.
    """
    if k == 0:
        raise ValueError("k must be non-zero")
    i = 0
    while i < len(values):
        if values[i] == x:
            return i
        i += max(i, abs(values[i] - x) // abs(k), 1)
    return None


def search_rotated(values: Sequence[int], target: int) -> int | None:
    """Index of target in a rotated sorted sequence of distinct values, or None."""
    if not values:
        return None
    start, end = 0, len(values) - 1
    while start < end:
        mid = start + (end - start) // 2
        if values[mid] >= values[0]:
            start = mid + 1
        else:
            end = mid
    if values[start] <= target <= values[-1]:
        low, high = start, len(values)
    else:
        low, high = 0, start
    index = bisect_left(values, target, low, high)
    if index < high and values[index] == target:
        return index
    return None


def integer_sqrt(x: int) -> int:
    """Largest integer whose square does not exceed x.

    Raises ValueError for negative x.
    """
    if x < 0:
        raise ValueError("integer_sqrt() of a negative number")
    return math.isqrt(x)


def has_pair_with_difference(values: Sequence[int], n: int) -> bool:
    """Whether two distinct elements differ by exactly n."""
    items = sorted(values)
    i, j = 0, 1
    while i < len(items) and j < len(items):
        difference = items[j] - items[i]
        if i != j and difference == n:
            return True
        if difference < n:
            j += 1
        else:
            i += 1
    return False


def equilibrium_index(values: Sequence[int]) -> int | None:
    """Index whose left sum equals its right sum, walking from the middle.

    The walk starts at the middle and steps toward the lighter side; it gives
    up when it reaches either end or comes back to an index already tried.
    """
    count = len(values)
    first, last = 0, count - 1
    prefix = [0, *accumulate(values)]
    total = prefix[-1]
    mid = first + (last - first) // 2
    seen: set[int] = set()
    while mid not in (first, last) and mid not in seen:
        seen.add(mid)
        left = prefix[mid]
        right = total - prefix[mid + 1]
        if left > right:
            mid -= 1
        elif left < right:
            mid += 1
        else:
            return mid
    return None