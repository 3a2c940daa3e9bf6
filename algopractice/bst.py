"""Unbalanced binary search tree with depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A tree node holding one value and two optional children."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinarySearchTree:
    """A binary search tree; values equal to a node go to its right."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None
        self._length = 0

    def insert(self, value: int) -> None:
        """Add ``value`` as a new leaf."""
        self._length += 1
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value >= node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left

    def lookup(self, value: int) -> bool:
        """Tell whether ``value`` is stored in the tree."""
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.right if value > node.value else node.left
        return False

    def __len__(self) -> int:
        return self._length

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.lookup(value)


def in_order(node: TreeNode | None) -> Iterator[int]:
    """Yield values left subtree first, then the node, then the right subtree."""
    if node is None:
        return
    yield from in_order(node.left)
    yield node.value
    yield from in_order(node.right)


def pre_order(node: TreeNode | None) -> Iterator[int]:
    """Yield the node's value before those of its subtrees."""
    if node is None:
        return
    yield node.value
    yield from pre_order(node.left)
    yield from pre_order(node.right)


def post_order(node: TreeNode | None) -> Iterator[int]:
    """Yield the node's value after those of its subtrees."""
    if node is None:
        return
    yield from post_order(node.left)
    yield from post_order(node.right)
    yield node.value


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """Return the k-th smallest value (1-based) in the tree under ``root``."""
    values = list(in_order(root))
    if not 1 <= k <= len(values):
        raise IndexError(f"k={k} out of range for {len(values)} values")
    return values[k - 1]