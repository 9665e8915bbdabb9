"""Binary tree nodes and the questions asked of them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence


@dataclass
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def average_of_levels(root: Optional[TreeNode]) -> List[float]:
    """Return the mean value of each level, from the root down.

    An empty tree gives an empty list.
    """
    if root is None:
        return []
    sums: List[float] = []
    counts: List[int] = []
    queue = deque([(root, 0)])
    while queue:
        node, level = queue.popleft()
        if level >= len(sums):
            sums.append(0.0)
            counts.append(0)
        sums[level] += node.val
        counts[level] += 1
        queue.extend((child, level + 1) for child in (node.left, node.right) if child is not None)
    return [total / count for total, count in zip(sums, counts)]


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Return True if some root-to-leaf path adds up to target_sum."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return root.val == target_sum
    remaining = target_sum - root.val
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def is_same_tree(root: Optional[TreeNode], other: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same shape and values."""
    if root is None or other is None:
        return root is None and other is None
    return (
        root.val == other.val
        and is_same_tree(root.left, other.left)
        and is_same_tree(root.right, other.right)
    )


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from sorted values, the middle one at the root."""
    if not nums:
        return None
    mid = len(nums) // 2
    return TreeNode(
        nums[mid],
        left=sorted_array_to_bst(nums[:mid]),
        right=sorted_array_to_bst(nums[mid + 1 :]),
    )


def pre_order_traversal(node: Optional[TreeNode]) -> List[int]:
    """Return the values visiting the left subtree, the node, then the right subtree."""
    if node is None:
        return []
    return [*pre_order_traversal(node.left), node.val, *pre_order_traversal(node.right)]


def post_order_traversal(node: Optional[TreeNode]) -> List[int]:
    """Return the right subtree's values, the node, then the left subtree's values.

    Each subtree is listed as pre_order_traversal lists it.
    """
    if node is None:
        return []
    return [*pre_order_traversal(node.right), node.val, *pre_order_traversal(node.left)]


def in_order_traversal(node: Optional[TreeNode]) -> List[int]:
    """Return the node's value, then the left and right subtrees' values.

    Each subtree is listed as pre_order_traversal lists it.
    """
    if node is None:
        return []
    return [node.val, *pre_order_traversal(node.left), *pre_order_traversal(node.right)]


def _tree_lines(node: Optional[TreeNode], depth: int) -> Iterator[str]:
    if node is None:
        return
    yield from _tree_lines(node.right, depth + 1)
    yield f"{' ' * (depth * 4)}{node.val}"
    yield from _tree_lines(node.left, depth + 1)


def format_tree(node: Optional[TreeNode]) -> str:
    """Render the tree sideways: right subtree above, four spaces of indent per level."""
    return "\n".join(_tree_lines(node, 0))