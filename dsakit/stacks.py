"""Stack structures and stack-based reversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


class MinStack:
    """A stack that reports its minimum in constant time using a helper stack."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        self._mins: list[int] = []
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        self._items.append(value)
        if not self._mins or value < self._mins[-1]:
            self._mins.append(value)
        else:
            self._mins.append(self._mins[-1])

    def pop(self) -> int:
        if not self._items:
            raise IndexError("stack is empty")
        self._mins.pop()
        return self._items.pop()

    def top(self) -> int:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def get_min(self) -> int:
        if not self._mins:
            raise IndexError("stack is empty")
        return self._mins[-1]

    def __len__(self) -> int:
        return len(self._items)


class EncodedMinStack:
    """A minimum-tracking stack that keeps only one extra value.

    When a new minimum arrives, ``2 * value - old_min`` is stored instead of
    the value; such an entry is smaller than the current minimum, which is
    how it is recognised and the previous minimum recovered on pop.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        self._min: Optional[int] = None
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        if not self._items:
            self._items.append(value)
            self._min = value
        elif value >= self._min:
            self._items.append(value)
        else:
            self._items.append(2 * value - self._min)
            self._min = value

    def pop(self) -> int:
        if not self._items:
            raise IndexError("stack is empty")
        stored = self._items.pop()
        if stored < self._min:
            value = self._min
            self._min = 2 * self._min - stored
        else:
            value = stored
        if not self._items:
            self._min = None
        return value

    def top(self) -> int:
        if not self._items:
            raise IndexError("stack is empty")
        stored = self._items[-1]
        return self._min if stored < self._min else stored

    def get_min(self) -> int:
        if not self._items:
            raise IndexError("stack is empty")
        return self._min

    def __len__(self) -> int:
        return len(self._items)


@dataclass(eq=False)
class _Cell:
    value: Any
    below: Optional["_Cell"] = None


class LinkedStack:
    """A last-in first-out stack on a singly linked list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._top: Optional[_Cell] = None
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        self._top = _Cell(value, self._top)

    def pop(self) -> Any:
        if self._top is None:
            raise IndexError("stack underflow")
        cell = self._top
        self._top = cell.below
        return cell.value

    def peek(self) -> Any:
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from top to bottom."""
        cell = self._top
        while cell is not None:
            yield cell.value
            cell = cell.below

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"


class ArrayStack:
    """A stack in a fixed-capacity array."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._slots: list[Any] = [None] * capacity
        self._size = 0

    def push(self, value: Any) -> None:
        if self.is_full():
            raise IndexError("stack overflow")
        self._slots[self._size] = value
        self._size += 1

    def pop(self) -> Any:
        if self.is_empty():
            raise IndexError("stack underflow")
        self._size -= 1
        value = self._slots[self._size]
        self._slots[self._size] = None
        return value

    def peek(self) -> Any:
        if self.is_empty():
            raise IndexError("stack is empty")
        return self._slots[self._size - 1]

    def is_full(self) -> bool:
        return self._size == len(self._slots)

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from top to bottom."""
        return reversed(self._slots[: self._size])

    def __repr__(self) -> str:
        return f"ArrayStack({list(self)!r})"


def reverse_stack(stack: Iterable[Any]) -> list[Any]:
    """Return a reversed copy of a stack held as a list with its top at the end."""
    first: list[Any] = []
    source = list(stack)
    while source:
        first.append(source.pop())
    second: list[Any] = []
    while first:
        second.append(first.pop())
    result: list[Any] = []
    while second:
        result.append(second.pop())
    return result


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing its characters onto a stack."""
    stack = list(text)
    return "".join(stack.pop() for _ in range(len(stack)))