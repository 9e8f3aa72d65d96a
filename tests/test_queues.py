import pytest

from algokit.queues import (
    CircularQueue,
    LinkedQueue,
    first_non_repeating_stream,
    interleave_halves,
    reverse_first_k,
    reverse_queue,
)


def test_circular_queue_fifo_order():
    q = CircularQueue()
    for value in (3, 10, 1):
        q.enqueue(value)
    assert [q.dequeue() for _ in range(3)] == [3, 10, 1]


def test_circular_queue_empty_dequeue_raises():
    q = CircularQueue()
    q.enqueue(3)
    q.dequeue()
    with pytest.raises(IndexError):
        q.dequeue()


def test_circular_queue_full_raises():
    q = CircularQueue()
    for value in range(q.capacity):
        q.enqueue(value)
    assert len(q) == q.capacity
    with pytest.raises(OverflowError):
        q.enqueue(99)


def test_circular_queue_wraps_around():
    q = CircularQueue(capacity=4)
    for value in (1, 2, 3, 4):
        q.enqueue(value)
    assert q.dequeue() == 1
    assert q.dequeue() == 2
    q.enqueue(5)
    q.enqueue(6)
    assert [q.dequeue() for _ in range(4)] == [3, 4, 5, 6]
    assert len(q) == 0


def test_circular_queue_rejects_bad_capacity():
    with pytest.raises(ValueError):
        CircularQueue(capacity=0)


def test_linked_queue_basic():
    q = LinkedQueue()
    q.push(1)
    assert q.front() == 1
    assert q.is_empty() is False
    q.push(2)
    assert q.rear() == 2
    assert q.pop() == 1
    assert q.pop() == 2
    assert q.is_empty() is True


def test_linked_queue_empty_errors():
    q = LinkedQueue()
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(IndexError):
        q.rear()


def test_first_non_repeating_stream_example():
    assert first_non_repeating_stream("aabc") == "a#bb"


def test_first_non_repeating_stream_distinct():
    assert first_non_repeating_stream("abc") == "aaa"


def test_first_non_repeating_stream_length_and_first_char():
    text = "zxzyxq"
    result = first_non_repeating_stream(text)
    assert len(result) == len(text)
    assert result[0] == text[0]
    assert set(result) <= set(text) | {"#"}


def test_interleave_halves_example():
    assert interleave_halves([11, 12, 13, 14, 15, 16, 17, 18]) == [11, 15, 12, 16, 13, 17, 14, 18]


def test_interleave_halves_invariants():
    items = [4, 9, 2, 7, 5, 1]
    result = interleave_halves(items)
    assert result[::2] == items[:3]
    assert result[1::2] == items[3:]


def test_interleave_halves_odd_raises():
    with pytest.raises(ValueError):
        interleave_halves([1, 2, 3])


def test_reverse_queue():
    items = [4, 3, 1, 10, 2, 6]
    result = reverse_queue(items)
    assert result[0] == items[-1]
    assert reverse_queue(result) == items


def test_reverse_first_k_is_involution():
    items = [1, 2, 3, 4, 5]
    once = reverse_first_k(items, 3)
    assert once[3:] == items[3:]
    assert sorted(once) == sorted(items)
    assert reverse_first_k(once, 3) == items


def test_reverse_first_k_bounds():
    items = [1, 2, 3, 4, 5]
    assert reverse_first_k(items, 0) == items
    assert reverse_first_k(items, len(items)) == reverse_queue(items)


def test_reverse_first_k_invalid_k():
    with pytest.raises(ValueError):
        reverse_first_k([1, 2], 3)
    with pytest.raises(ValueError):
        reverse_first_k([1, 2], -1)