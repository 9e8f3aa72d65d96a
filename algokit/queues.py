"""Queue structures and queue puzzles."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Iterator


class CircularQueue:
    """A fixed-capacity FIFO queue over a ring buffer."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._buffer: list[int | None] = [None] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def __len__(self) -> int:
        return self._size

    def enqueue(self, value: int) -> None:
        """Add a value at the rear. Raises OverflowError when the queue is full."""
        if self._size == self.capacity:
            raise OverflowError("circular queue is full")
        self._buffer[(self._head + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the front value. Raises IndexError when empty."""
        if self._size == 0:
            raise IndexError("dequeue from an empty circular queue")
        value = self._buffer[self._head]
        self._buffer[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return value  # type: ignore[return-value]


class LinkedQueue:
    """An unbounded FIFO queue."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def push(self, value: int) -> None:
        """Add a value at the rear."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the front value. Raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def front(self) -> int:
        """The front value. Raises IndexError when empty."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def rear(self) -> int:
        """The rear value. Raises IndexError when empty."""
        if not self._items:
            raise IndexError("rear of an empty queue")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items


def first_non_repeating_stream(text: str) -> str:
    """For each prefix of text, its first character seen only once, or '#' if none."""
    counts: Counter[str] = Counter()
    pending: deque[str] = deque()
    result = []
    for ch in text:
        counts[ch] += 1
        pending.append(ch)
        while pending and counts[pending[0]] > 1:
            pending.popleft()
        result.append(pending[0] if pending else "#")
    return "".join(result)


def interleave_halves(queue: Iterable[int]) -> list[int]:
    """Interleave the first half with the second: a1, b1, a2, b2, ...

    Raises ValueError for an odd number of elements.
    """
    items = list(queue)
    if len(items) % 2:
        raise ValueError("interleaving needs an even number of elements")
    half = len(items) // 2
    return [value for pair in zip(items[:half], items[half:]) for value in pair]


def reverse_queue(queue: Iterable[int]) -> list[int]:
    """The elements in reverse order."""
    return list(queue)[::-1]


def reverse_first_k(queue: Iterable[int], k: int) -> list[int]:
    """Reverse the first k elements and keep the rest in order.

    Raises ValueError when k is negative or larger than the queue.
    """
    items = list(queue)
    if not 0 <= k <= len(items):
        raise ValueError("k must be between 0 and the queue length")
    return items[:k][::-1] + items[k:]