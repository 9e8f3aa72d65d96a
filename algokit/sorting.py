"""Comparison and counting sorts, merging and partitioning of integer lists."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using bubble sort, stopping early once a pass makes no swap."""
    result = list(values)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of integers by counting each value between the minimum and maximum."""
    items = list(values)
    if not items:
        return []
    low, high = min(items), max(items)
    counts = [0] * (high - low + 1)
    for value in items:
        counts[value - low] += 1
    return [low + offset for offset, count in enumerate(counts) for _ in range(count)]


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using insertion sort."""
    result = list(values)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy using selection sort."""
    result = list(values)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list; on ties the second's element comes first."""
    left, right = list(first), list(second)
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def sort_binary(values: Iterable[int]) -> list[int]:
    """Return the 0/1 values with all zeros before all ones.

    Raises ValueError if any value is not 0 or 1.
    """
    items = list(values)
    invalid = [value for value in items if value not in (0, 1)]
    if invalid:
        raise ValueError(f"expected only 0 and 1, got {invalid[0]!r}")
    zeros = items.count(0)
    return [0] * zeros + [1] * (len(items) - zeros)


def move_zeroes(values: Iterable[int]) -> list[int]:
    """Return the values with every zero moved to the end, keeping the order of the rest."""
    items = list(values)
    nonzero = [value for value in items if value != 0]
    return nonzero + [0] * (len(items) - len(nonzero))