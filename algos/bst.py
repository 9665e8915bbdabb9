"""Binary search tree with membership and minimum-difference queries."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Iterator, List, Optional

# Returned by min_diff when the tree holds fewer than two values.
MAX_DIFF = 2**31 - 1


@dataclass
class _Node:
    val: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, val: int) -> None:
        """Add a value, keeping duplicates."""
        new_node = _Node(val)
        if self._root is None:
            self._root = new_node
            return
        node = self._root
        while True:
            if val < node.val:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def search(self, val: int) -> bool:
        """Return True if the value is in the tree."""
        node = self._root
        while node is not None:
            if val == node.val:
                return True
            node = node.left if val < node.val else node.right
        return False

    def _walk(self) -> Iterator[int]:
        stack: List[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.val
            node = node.right

    def in_order(self) -> List[int]:
        """Return the values in ascending order."""
        return list(self._walk())

    def min_diff(self) -> int:
        """Return the smallest absolute difference between any two values.

        A tree with fewer than two values gives MAX_DIFF.
        """
        return min((abs(b - a) for a, b in pairwise(self._walk())), default=MAX_DIFF)