"""A LIFO stack and stack-based puzzles.

Stacks passed to the functions are lists with the bottom element first;
results are new lists in the same layout and inputs are never modified.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

_OPERATORS = frozenset("+-*/")
_PAIRS = {")": "(", "}": "{", "]": "["}


class Stack:
    """An unbounded LIFO stack."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = list(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def push(self, value: int) -> None:
        """Place a value on top."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value. Raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> int:
        """The top value. Raises IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items


def minimum_reversal_cost(text: str) -> int | None:
    """How many braces must be flipped to balance text, or None for an odd length.

    Every character other than '{' counts as a closing brace.
    """
    if len(text) % 2:
        return None
    unmatched: list[str] = []
    for ch in text:
        if ch != "{" and unmatched and unmatched[-1] == "{":
            unmatched.pop()
        else:
            unmatched.append("{" if ch == "{" else "}")
    opening = unmatched.count("{")
    closing = len(unmatched) - opening
    return (opening + 1) // 2 + (closing + 1) // 2


def insert_at_bottom(stack: Sequence[int], value: int) -> list[int]:
    """A copy of the stack with value placed beneath every element."""
    return [value, *stack]


def _smaller_bounds(heights: Sequence[int], indices: Iterable[int], default: int) -> list[int]:
    bounds = [default] * len(heights)
    pending: list[int] = []
    for i in indices:
        while pending and heights[pending[-1]] >= heights[i]:
            pending.pop()
        bounds[i] = pending[-1] if pending else default
        pending.append(i)
    return bounds


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """The area of the largest rectangle that fits under the histogram."""
    count = len(heights)
    following = _smaller_bounds(heights, reversed(range(count)), count)
    preceding = _smaller_bounds(heights, range(count), -1)
    return max(
        (height * (following[i] - preceding[i] - 1) for i, height in enumerate(heights)),
        default=0,
    )


def remove_middle(stack: Sequence[int]) -> list[int]:
    """A copy of the stack without its middle element, counting from the top.

    Raises IndexError for an empty stack.
    """
    if not stack:
        raise IndexError("remove_middle() of an empty stack")
    items = list(stack)
    del items[len(items) - 1 - len(items) // 2]
    return items


def next_smaller(values: Sequence[int]) -> list[int | None]:
    """For each value, the nearest strictly smaller value to its right, or None."""
    result: list[int | None] = [None] * len(values)
    pending: list[int] = []
    for i in reversed(range(len(values))):
        current = values[i]
        while pending and pending[-1] >= current:
            pending.pop()
        result[i] = pending[-1] if pending else None
        pending.append(current)
    return result


def has_redundant_brackets(expression: str) -> bool:
    """Whether some pair of parentheses encloses no operator of its own.

    Raises ValueError for unbalanced parentheses.
    """
    pending: list[str] = []
    for ch in expression:
        if ch == ")":
            if not pending:
                raise ValueError("unbalanced parentheses")
            if pending[-1] not in _OPERATORS:
                return True
            while pending and pending[-1] != "(":
                pending.pop()
            if not pending:
                raise ValueError("unbalanced parentheses")
            pending.pop()
        elif ch == "(" or ch in _OPERATORS:
            pending.append(ch)
    if "(" in pending:
        raise ValueError("unbalanced parentheses")
    return False


def reverse_with_stack(text: str) -> str:
    """The characters of text in reverse order, popped off a stack."""
    stack = Stack()
    for ch in text:
        stack.push(ord(ch))
    return "".join(chr(code) for code in stack)


def reverse_stack(stack: Sequence[int]) -> list[int]:
    """A copy of the stack turned upside down."""
    return list(stack)[::-1]


def sort_stack(stack: Sequence[int]) -> list[int]:
    """A copy of the stack sorted so the largest value is on top."""
    return sorted(stack)


def is_valid_parenthesis(expression: str) -> bool:
    """Whether the brackets are balanced and properly nested.

    Any character other than a closing bracket is treated as an opener, so
    text other than brackets makes the expression invalid.
    """
    pending: list[str] = []
    for ch in expression:
        if ch in _PAIRS:
            if not pending or pending[-1] != _PAIRS[ch]:
                return False
            pending.pop()
        else:
            pending.append(ch)
    return not pending