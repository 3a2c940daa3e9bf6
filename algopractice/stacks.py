"""Last-in first-out stacks backed by a list, linked nodes and a deque."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


class StackEmptyError(IndexError):
    """Raised when a value is asked of an empty stack."""


class ArrayStack:
    """A stack of integers kept in a Python list."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return not self._items

    def __iter__(self) -> Iterator[int]:
        """Yield values from the top down."""
        return reversed(self._items)


@dataclass(eq=False)
class _Node:
    val: int
    next: _Node | None = None


class LinkedStack:
    """A stack of integers kept in singly linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._length = 0

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._top = _Node(value, self._top)
        self._length += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("pop from an empty stack")
        value = self._top.val
        self._top = self._top.next
        self._length -= 1
        return value

    def peek(self) -> int:
        """Return the top value."""
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.val

    def __len__(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return self._length == 0

    def __iter__(self) -> Iterator[int]:
        """Yield values from the top down."""
        node = self._top
        while node is not None:
            yield node.val
            node = node.next


class DequeStack:
    """A stack of arbitrary values kept in a deque."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.appendleft(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return not self._items