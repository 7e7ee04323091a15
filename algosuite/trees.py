"""Algorithms on binary trees."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def width_of_binary_tree(root: TreeNode | None) -> int:
    """Widest level, counting the gaps between its outermost nodes."""
    if root is None:
        return 0
    best = 1
    level: list[tuple[TreeNode, int]] = [(root, 0)]
    while level:
        first = level[0][1]
        best = max(best, level[-1][1] - first + 1)
        level = [
            (child, 2 * (position - first) + offset)
            for node, position in level
            for offset, child in ((1, node.left), (2, node.right))
            if child is not None
        ]
    return best


def longest_zigzag(root: TreeNode | None) -> int:
    """Edges on the longest downward path alternating between left and right."""
    best = 0
    pending: list[tuple[TreeNode, int, int]] = [] if root is None else [(root, 0, 0)]
    while pending:
        node, by_left, by_right = pending.pop()
        best = max(best, by_left, by_right)
        if node.left is not None:
            pending.append((node.left, by_right + 1, 0))
        if node.right is not None:
            pending.append((node.right, 0, by_left + 1))
    return best