"""Queue and deque structures and queue-based problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Link:
    value: Any
    prev: Optional["_Link"] = None
    next: Optional["_Link"] = None


class LinkedDeque:
    """A double-ended queue on a doubly linked list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_back(self, value: Any) -> None:
        link = _Link(value, prev=self._tail)
        if self._tail is None:
            self._head = link
        else:
            self._tail.next = link
        self._tail = link
        self._size += 1

    def push_front(self, value: Any) -> None:
        link = _Link(value, next=self._head)
        if self._head is None:
            self._tail = link
        else:
            self._head.prev = link
        self._head = link
        self._size += 1

    def pop_front(self) -> Any:
        if self._head is None:
            raise IndexError("queue is empty")
        link = self._head
        self._head = link.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return link.value

    def pop_back(self) -> Any:
        if self._tail is None:
            raise IndexError("queue is empty")
        link = self._tail
        self._tail = link.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return link.value

    def front(self) -> Any:
        if self._head is None:
            raise IndexError("queue is empty")
        return self._head.value

    def back(self) -> Any:
        if self._tail is None:
            raise IndexError("queue is empty")
        return self._tail.value

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        link = self._head
        while link is not None:
            yield link.value
            link = link.next

    def __repr__(self) -> str:
        return f"LinkedDeque({list(self)!r})"


class ArrayQueue:
    """A queue in a fixed array; slots freed by popping are not reused."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._back = 0

    def push(self, value: Any) -> None:
        if self._back == len(self._slots):
            raise IndexError("queue is full")
        self._slots[self._back] = value
        self._back += 1

    def pop(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        return value

    def front(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._front]

    def back(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._back - 1]

    def is_empty(self) -> bool:
        return self._front == self._back

    def __len__(self) -> int:
        return self._back - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:self._back])

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self)!r})"


class LinkedQueue:
    """A first-in first-out queue on a singly linked list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        link = _Link(value)
        if self._tail is None:
            self._head = link
        else:
            self._tail.next = link
        self._tail = link
        self._size += 1

    def pop(self) -> Any:
        if self._head is None:
            raise IndexError("queue is empty")
        link = self._head
        self._head = link.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return link.value

    def front(self) -> Any:
        if self._head is None:
            raise IndexError("queue is empty")
        return self._head.value

    def back(self) -> Any:
        if self._tail is None:
            raise IndexError("queue is empty")
        return self._tail.value

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        link = self._head
        while link is not None:
            yield link.value
            link = link.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"


class StackQueue:
    """A queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, value: Any) -> None:
        self._inbox.append(value)

    def pop(self) -> Any:
        self._refill()
        return self._outbox.pop()

    def peek(self) -> Any:
        self._refill()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox


def rotate_through(queue: deque) -> list[Any]:
    """Return the queue's items front to back by cycling it once; it ends unchanged."""
    items: list[Any] = []
    for _ in range(len(queue)):
        value = queue.popleft()
        items.append(value)
        queue.append(value)
    return items


def reverse_queue(queue: deque) -> None:
    """Reverse the queue in place, using a stack."""
    stack: list[Any] = []
    while queue:
        stack.append(queue.popleft())
    while stack:
        queue.append(stack.pop())


def remove_even_positions(queue: deque) -> None:
    """Drop the 1st, 3rd, 5th... items in place, keeping the rest in order."""
    drop = True
    for _ in range(len(queue)):
        value = queue.popleft()
        if not drop:
            queue.append(value)
        drop = not drop


def reverse_first_k(queue: deque, k: int) -> None:
    """Reverse the first ``k`` items of the queue in place."""
    if not 0 <= k <= len(queue):
        raise ValueError("k must be between 0 and the queue length")
    stack = [queue.popleft() for _ in range(k)]
    while stack:
        queue.append(stack.pop())
    for _ in range(len(queue) - k):
        queue.append(queue.popleft())


def first_negative_in_windows(values: Sequence[int], k: int) -> list[int]:
    """For each window of ``k`` items, return its first negative value, or 0."""
    if k < 1:
        raise ValueError("k must be at least 1")
    negatives = deque(i for i, value in enumerate(values) if value < 0)
    result: list[int] = []
    for start in range(len(values) - k + 1):
        while negatives and negatives[0] < start:
            negatives.popleft()
        if not negatives or negatives[0] >= start + k:
            result.append(0)
        else:
            result.append(values[negatives[0]])
    return result


def count_unfed_students(students: Sequence[int], sandwiches: Sequence[int]) -> int:
    """Return how many students cannot get their preferred sandwich."""
    if len(students) != len(sandwiches):
        raise ValueError("students and sandwiches must have the same length")
    line = deque(students)
    stack = deque(sandwiches)
    refusals = 0
    while line and refusals < len(line):
        if line[0] == stack[0]:
            line.popleft()
            stack.popleft()
            refusals = 0
        else:
            line.append(line.popleft())
            refusals += 1
    return len(stack)


def deck_revealed_increasing(deck: Iterable[int]) -> list[int]:
    """Order a deck so that reveal-one, move-one-to-bottom shows cards in increasing order."""
    cards = sorted(deck)
    positions = deque(range(len(cards)))
    result: list[int] = [0] * len(cards)
    for card in cards:
        result[positions.popleft()] = card
        if positions:
            positions.append(positions.popleft())
    return result