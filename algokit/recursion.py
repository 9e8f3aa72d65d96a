"""Small recursive routines over lists and strings: searches, sums, permutations and subsets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import product

KEYPAD_LETTERS = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")

DIGIT_NAMES = ("Zero", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine")


def array_sum(values: Iterable[int]) -> int:
    """The sum of all values."""
    return sum(values)


def binary_search(values: Sequence[int], key: int) -> bool:
    """Whether key occurs in the sorted sequence."""

    def search(start: int, end: int) -> bool:
        if start > end:
            return False
        mid = start + (end - start) // 2
        if values[mid] == key:
            return True
        if values[mid] > key:
            return search(start, mid - 1)
        return search(mid + 1, end)

    return search(0, len(values) - 1)


def is_palindrome(text: str) -> bool:
    """Whether text reads the same forwards and backwards."""
    return text == text[::-1]


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number; n itself for n of one or less."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def letter_combinations(digits: str) -> list[str]:
    """Every string the phone keypad digits can spell, in keypad order.

    Raises ValueError for a character that is not a decimal digit.
    """
    groups = []
    for ch in digits:
        if ch not in "0123456789":
            raise ValueError(f"not a digit: {ch!r}")
        groups.append(KEYPAD_LETTERS[int(ch)])
    return ["".join(letters) for letters in product(*groups)]


def linear_search(values: Iterable[int], key: int) -> bool:
    """Whether key occurs among the values."""
    return any(value == key for value in values)


def permutations(values: Iterable[int]) -> list[list[int]]:
    """All orderings of the values, produced by swapping each element into place in turn."""
    items = list(values)
    result: list[list[int]] = []

    def solve(index: int) -> None:
        if index >= len(items):
            result.append(list(items))
            return
        for i in range(index, len(items)):
            items[i], items[index] = items[index], items[i]
            solve(index + 1)
            items[i], items[index] = items[index], items[i]

    solve(0)
    return result


def power_set(values: Iterable[int]) -> list[list[int]]:
    """Every subset of the values, each keeping the original order.

    Subsets leaving out an element come before those that include it.
    """
    items = list(values)

    def subsets(index: int, chosen: list[int]) -> Iterator[list[int]]:
        if index >= len(items):
            yield chosen
            return
        yield from subsets(index + 1, chosen)
        yield from subsets(index + 1, [*chosen, items[index]])

    return list(subsets(0, []))


def reverse_list(values: Iterable[int]) -> list[int]:
    """The values in reverse order."""
    return list(values)[::-1]


def reverse_string(text: str) -> str:
    """The characters of text in reverse order."""
    return text[::-1]


def say_digits(number: int) -> str:
    """The English names of the decimal digits of number, space separated; empty for zero.

    Raises ValueError for a negative number.
    """
    if number < 0:
        raise ValueError("say_digits() needs a non-negative number")
    if number == 0:
        return ""
    return " ".join(DIGIT_NAMES[int(ch)] for ch in str(number))


def is_sorted(values: Sequence[int], order: str = "asc") -> bool:
    """Whether the values are strictly ascending ("asc") or strictly descending ("desc").

    Raises ValueError for any other order.
    """
    pairs = zip(values, values[1:])
    if order == "asc":
        return all(previous < current for previous, current in pairs)
    if order == "desc":
        return all(previous > current for previous, current in pairs)
    raise ValueError(f"order must be 'asc' or 'desc', got {order!r}")