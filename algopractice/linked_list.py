"""Singly linked list and digit-by-digit addition of reversed numbers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest


@dataclass(eq=False)
class ListNode:
    """A list node holding one value and a link to the next node."""

    val: int = 0
    next: ListNode | None = None


class LinkedList:
    """A singly linked list that grows at its head."""

    def __init__(self) -> None:
        self.head: ListNode | None = None
        self._length = 0

    def add(self, node: ListNode) -> None:
        """Put ``node`` in front of the current head."""
        node.next = self.head
        self.head = node
        self._length += 1

    def extend(self, nums: Iterable[int]) -> None:
        """Add a node for each value; the last value ends up at the head."""
        for value in nums:
            self.add(ListNode(value))

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.val
            node = node.next

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: ListNode | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def clear(self) -> None:
        """Drop every node."""
        self.head = None
        self._length = 0


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored least significant digit first; return the sum's head."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry > 0:
        if l1 is not None:
            carry += l1.val
            l1 = l1.next
        if l2 is not None:
            carry += l2.val
            l2 = l2.next
        carry, digit = divmod(carry, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def add_two_digit_lists(l1: list[int], l2: list[int]) -> list[int]:
    """Add two numbers given as digit lists, least significant digit first."""
    result: list[int] = []
    carry = 0
    for first, second in zip_longest(l1, l2, fillvalue=0):
        carry, digit = divmod(first + second + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return result