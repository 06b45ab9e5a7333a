from collections import Counter, deque

import pytest

from dsakit.queues import (
    ArrayQueue,
    LinkedDeque,
    LinkedQueue,
    StackQueue,
    count_unfed_students,
    deck_revealed_increasing,
    first_negative_in_windows,
    remove_even_positions,
    reverse_first_k,
    reverse_queue,
    rotate_through,
)


# LinkedDeque

def test_deque_push_front_order():
    dq = LinkedDeque()
    for value in [10, 20, 40, 60]:
        dq.push_front(value)
    assert list(dq) == [60, 40, 20, 10]
    assert len(dq) == 4
    assert dq.front() == 60
    assert dq.back() == 10


def test_deque_mixed_operations():
    dq = LinkedDeque()
    for value in [10, 20, 40, 60, 70, 60, 0, 20]:
        dq.push_front(value)
    dq.push_back(34)
    assert dq.pop_front() == 20
    assert dq.pop_back() == 34
    assert len(dq) == 7
    assert dq.front() == 0


def test_deque_pop_to_empty_and_reuse():
    dq = LinkedDeque([1])
    assert dq.pop_back() == 1
    assert dq.is_empty()
    dq.push_front(5)
    assert dq.front() == dq.back() == 5
    assert dq.pop_front() == 5
    assert dq.is_empty()


@pytest.mark.parametrize("method", ["pop_front", "pop_back", "front", "back"])
def test_deque_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(LinkedDeque(), method)()


# ArrayQueue

def test_array_queue_fifo():
    q = ArrayQueue(5)
    for value in [10, 20, 30, 40]:
        q.push(value)
    assert list(q) == [10, 20, 30, 40]
    assert q.front() == 10
    assert q.back() == 40
    assert q.pop() == 10
    assert list(q) == [20, 30, 40]
    assert len(q) == 3


def test_array_queue_full():
    q = ArrayQueue(5)
    for value in [10, 20, 30, 40, 50]:
        q.push(value)
    with pytest.raises(IndexError):
        q.push(60)
    assert list(q) == [10, 20, 30, 40, 50]


def test_array_queue_does_not_reuse_popped_slots():
    q = ArrayQueue(2)
    q.push(1)
    q.push(2)
    q.pop()
    with pytest.raises(IndexError):
        q.push(3)
    assert len(q) == 1


def test_array_queue_empty_errors():
    q = ArrayQueue(3)
    assert q.is_empty()
    for method in (q.pop, q.front, q.back):
        with pytest.raises(IndexError):
            method()


def test_array_queue_negative_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(-1)


# LinkedQueue

def test_linked_queue_fifo():
    values = [10, 20, 40, 60, 70, 60, 0, 20]
    q = LinkedQueue(values)
    assert list(q) == values
    assert len(q) == len(values)
    assert q.pop() == values[0]
    assert list(q) == values[1:]
    assert q.back() == values[-1]


def test_linked_queue_drain_and_refill():
    q = LinkedQueue([1, 2])
    assert [q.pop(), q.pop()] == [1, 2]
    assert q.is_empty()
    with pytest.raises(IndexError):
        q.pop()
    q.push(9)
    assert q.front() == q.back() == 9


# StackQueue

def test_stack_queue_fifo_interleaved():
    q = StackQueue()
    q.push(1)
    q.push(2)
    assert q.peek() == 1
    assert q.pop() == 1
    q.push(3)
    assert q.pop() == 2
    assert q.pop() == 3
    assert q.is_empty()


def test_stack_queue_empty_raises():
    q = StackQueue()
    with pytest.raises(IndexError):
        q.pop()
    with pytest.raises(IndexError):
        q.peek()


# queue problems

def test_rotate_through_leaves_queue_unchanged():
    q = deque([12, 13, 14, 15, 16])
    assert rotate_through(q) == [12, 13, 14, 15, 16]
    assert list(q) == [12, 13, 14, 15, 16]


def test_reverse_queue():
    q = deque([12, 13, 14, 15, 16])
    reverse_queue(q)
    assert list(q) == [16, 15, 14, 13, 12]


def test_remove_even_positions():
    values = [1, 2, 3, 4, 5, 6, 7]
    q = deque(values)
    remove_even_positions(q)
    assert list(q) == values[1::2]


def test_reverse_first_k_whole_queue():
    values = [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    q = deque(values)
    reverse_first_k(q, 10)
    assert list(q) == values[::-1]


def test_reverse_first_k_partial():
    values = [1, 2, 3, 4, 5]
    q = deque(values)
    reverse_first_k(q, 3)
    assert list(q) == values[:3][::-1] + values[3:]


def test_reverse_first_k_out_of_range():
    with pytest.raises(ValueError):
        reverse_first_k(deque([1, 2]), 3)


def test_first_negative_in_windows_source_example():
    values = [3, -4, -7, 30, 7, -9, 2, 1, 6, -1]
    result = first_negative_in_windows(values, 3)
    assert len(result) == len(values) - 3 + 1
    for start, found in enumerate(result):
        window = values[start:start + 3]
        negatives = [v for v in window if v < 0]
        assert found == (negatives[0] if negatives else 0)


def test_first_negative_in_windows_errors_and_edges():
    with pytest.raises(ValueError):
        first_negative_in_windows([1, 2], 0)
    assert first_negative_in_windows([1, 2], 5) == []


def test_count_unfed_students_source_example():
    assert count_unfed_students([1, 1, 0, 0], [0, 1, 0, 1]) == 0


def test_count_unfed_students_some_left():
    assert count_unfed_students([1, 1, 1, 0, 0, 1], [1, 0, 0, 0, 1, 1]) == 3


def test_count_unfed_students_length_mismatch():
    with pytest.raises(ValueError):
        count_unfed_students([1], [1, 0])


@pytest.mark.parametrize("deck", [[1, 2, 3, 4, 2, 4], [17, 13, 11, 2, 3, 5, 7], [], [5]])
def test_deck_revealed_increasing_reveals_sorted(deck):
    arranged = deck_revealed_increasing(deck)
    assert Counter(arranged) == Counter(deck)
    pile = deque(arranged)
    revealed = []
    while pile:
        revealed.append(pile.popleft())
        if pile:
            pile.append(pile.popleft())
    assert revealed == sorted(deck)