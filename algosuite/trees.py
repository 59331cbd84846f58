"""Binary tree problems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return whether the tree is a binary search tree with strictly ordered keys."""

    def within(node: Optional[TreeNode], lo: Optional[int], hi: Optional[int]) -> bool:
        if node is None:
            return True
        if lo is not None and node.val <= lo:
            return False
        if hi is not None and node.val >= hi:
            return False
        return within(node.left, lo, node.val) and within(node.right, node.val, hi)

    return within(root, None, None)


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return whether two trees have the same shape and the same values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )