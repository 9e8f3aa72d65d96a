"""Assorted puzzles over integer lists: membership, rotation, products and digit sums.

Functions that look for a value or a position return None when there is none.
Inputs are never modified; results are new lists.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, zip_longest


def in_sequence(a: int, b: int, c: int) -> bool:
    """Whether b is a term of the arithmetic sequence starting at a with step c."""
    if c == 0:
        return a == b
    steps, remainder = divmod(b - a, c)
    return remainder == 0 and steps >= 0


def is_sorted_and_rotated(values: Sequence[int]) -> bool:
    """Whether the values are a non-decreasing sequence rotated by some amount."""
    if not values:
        return True
    descents = sum(1 for previous, current in zip(values, values[1:]) if previous > current)
    if values[-1] > values[0]:
        descents += 1
    return descents <= 1


def find_duplicate(values: Iterable[int]) -> int | None:
    """The smallest value that occurs more than once, or None."""
    items = sorted(values)
    for previous, current in zip(items, items[1:]):
        if previous == current:
            return current
    return None


def has_unique_occurrences(values: Iterable[int]) -> bool:
    """Whether every distinct value occurs a different number of times."""
    counts = list(Counter(values).values())
    return len(counts) == len(set(counts))


def first_missing_positive(values: Iterable[int]) -> int:
    """The smallest positive integer that does not occur in the values."""
    present = set(values)
    candidate = 1
    while candidate in present:
        candidate += 1
    return candidate


def values_equal_to_index(values: Iterable[int]) -> list[int]:
    """Values that equal their own one-based position."""
    return [value for position, value in enumerate(values, start=1) if value == position]


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Distinct values present in both inputs, in ascending order."""
    return sorted(set(first) & set(second))


def majority_element(values: Sequence[int]) -> int | None:
    """The value occurring in more than half the positions, or None."""
    if not values:
        return None
    candidate = values[0]
    count = 0
    for value in values:
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if values.count(candidate) > len(values) // 2:
        return candidate
    return None


def middle_of_three(a: int, b: int, c: int) -> int:
    """The median of three numbers."""
    return sorted((a, b, c))[1]


def can_be_non_decreasing(values: Iterable[int]) -> bool:
    """Whether changing at most one element makes the values non-decreasing."""
    items = list(values)
    modified = False
    for i in range(len(items) - 1):
        if items[i] <= items[i + 1]:
            continue
        if modified:
            return False
        if i == 0 or items[i + 1] >= items[i - 1]:
            items[i] = items[i + 1]
        else:
            items[i + 1] = items[i]
        modified = True
    return True


def two_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """The first pair of indices (i, j), i < j, whose values add up to target, or None."""
    for i, first in enumerate(values):
        for j in range(i + 1, len(values)):
            if first + values[j] == target:
                return i, j
    return None


def product_except_self(values: Sequence[int]) -> list[int]:
    """For each position, the product of every other value."""
    prefix = [1, *accumulate(values, lambda acc, value: acc * value)]
    suffix = [1, *accumulate(reversed(values), lambda acc, value: acc * value)]
    count = len(values)
    return [prefix[i] * suffix[count - 1 - i] for i in range(count)]


def repeated_and_missing(values: Iterable[int]) -> tuple[int, int]:
    """For a list meant to hold 1..n once each, the value repeated and the value missing.

    Raises ValueError when no value is repeated.
    """
    items = list(values)
    repeated = find_duplicate(items)
    if repeated is None:
        raise ValueError("no repeated value")
    size = len(items)
    missing = size * (size + 1) // 2 - (sum(items) - repeated)
    return repeated, missing


def reverse_after(values: Sequence[int], m: int) -> list[int]:
    """A copy with the elements after index m reversed.

    Raises ValueError for m below -1.
    """
    if m < -1:
        raise ValueError("m must be at least -1")
    items = list(values)
    return items[: m + 1] + items[m + 1 :][::-1]


def rotate(values: Sequence[int], k: int) -> list[int]:
    """A copy rotated right by k positions."""
    items = list(values)
    if not items:
        return []
    shift = k % len(items)
    if shift == 0:
        return items
    return items[-shift:] + items[:-shift]


def sum_of_elements(values: Iterable[int]) -> int:
    """The sum of all values."""
    return sum(values)


def add_digit_arrays(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Add two numbers given as lists of decimal digits, most significant first."""
    digits: list[int] = []
    carry = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    while carry:
        carry, digit = divmod(carry, 10)
        digits.append(digit)
    return digits[::-1]


def reversed_array(values: Iterable[int]) -> list[int]:
    """The values in reverse order."""
    return list(values)[::-1]


def separate_negative_positive(values: Iterable[int]) -> list[int]:
    """Negatives first, in reverse order of appearance, then the rest in order."""
    items = list(values)
    negatives = [value for value in reversed(items) if value < 0]
    rest = [value for value in items if value >= 0]
    return negatives + rest