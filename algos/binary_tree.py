"""A set of ordered values stored in a binary tree."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    left: Optional[_Node[T]] = None
    right: Optional[_Node[T]] = None


class BinaryTree(Generic[T]):
    """Container of unique values kept in an unbalanced binary tree."""

    def __init__(self) -> None:
        self._root: Optional[_Node[T]] = None
        self._size = 0

    def insert(self, value: T) -> None:
        """Add a value; a value already present is ignored."""
        if self._root is None:
            self._root = _Node(value)
            self._size = 1
            return
        node = self._root
        while True:
            if value == node.value:
                return
            if value < node.value:  # type: ignore[operator]
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
        self._size += 1

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __len__(self) -> int:
        return self._size


@dataclass(frozen=True)
class QueryReport:
    """Outcome of query_binary_tree."""

    found: int
    expected: int
    num_queries: int
    build_seconds: float
    query_seconds: float


def query_binary_tree(
    step: int = 5, num_elements: int = 1_000, num_queries: int = 1_000_000
) -> QueryReport:
    """Fill a tree with multiples of step below num_elements and count query hits."""
    if step <= 0:
        raise ValueError("step must be positive")
    if num_elements <= 0:
        raise ValueError("num_elements must be positive")

    start = time.perf_counter()
    tree: BinaryTree[int] = BinaryTree()
    for value in range(0, num_elements, step):
        tree.insert(value)
    build_seconds = time.perf_counter() - start

    start = time.perf_counter()
    found = sum(1 for query in range(num_queries) if query % num_elements in tree)
    query_seconds = time.perf_counter() - start

    expected = (num_elements // step) * (num_queries // num_elements)
    return QueryReport(found, expected, num_queries, build_seconds, query_seconds)