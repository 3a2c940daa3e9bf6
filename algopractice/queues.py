"""First-in first-out queues backed by a list, linked nodes and a deque."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any


class QueueEmptyError(IndexError):
    """Raised when a value is asked of an empty queue."""


class ArrayQueue:
    """A queue of integers kept in a Python list."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if not self._items:
            raise QueueEmptyError("dequeue from an empty queue")
        return self._items.pop(0)

    def front(self) -> int:
        """Return the front value."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def back(self) -> int:
        """Return the back value."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return not self._items


@dataclass(eq=False)
class _Node:
    data: int
    next: _Node | None = None


class LinkedQueue:
    """A queue of integers kept in singly linked nodes."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the back."""
        node = _Node(value)
        if self._tail is not None:
            self._tail.next = node
        self._tail = node
        if self._head is None:
            self._head = node
        self._length += 1

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if self._head is None:
            raise QueueEmptyError("dequeue from an empty queue")
        data = self._head.data
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._length -= 1
        return data

    def front(self) -> int:
        """Return the front value."""
        if self._head is None:
            raise QueueEmptyError("queue is empty")
        return self._head.data

    def back(self) -> int:
        """Return the back value."""
        if self._tail is None:
            raise QueueEmptyError("queue is empty")
        return self._tail.data

    def __len__(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return self._length == 0


class DequeQueue:
    """A queue of arbitrary values kept in a deque."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise QueueEmptyError("dequeue from an empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front value."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def back(self) -> Any:
        """Return the back value."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return not self._items