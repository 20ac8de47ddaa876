"""Binary trees built from preorder sequences, and the largest BST inside one."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class BinaryNode:
    """A node of a binary tree."""

    data: int
    left: BinaryNode | None = None
    right: BinaryNode | None = None


def build_from_preorder(values: Iterable[int | None]) -> BinaryNode | None:
    """Build a tree from values in preorder, where None marks a missing child.

    Running out of values also ends a branch.
    """
    items: Iterator[int | None] = iter(values)

    def build() -> BinaryNode | None:
        value = next(items, None)
        if value is None:
            return None
        node = BinaryNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def largest_bst(root: BinaryNode | None) -> tuple[BinaryNode | None, int]:
    """Root and node count of the largest subtree that is a binary search tree."""

    def visit(
        node: BinaryNode | None,
    ) -> tuple[bool, float, float, BinaryNode | None, int]:
        if node is None:
            return True, math.inf, -math.inf, None, 0
        l_bst, l_min, l_max, l_root, l_size = visit(node.left)
        r_bst, r_min, r_max, r_root, r_size = visit(node.right)
        low = min(node.data, l_min, r_min)
        high = max(node.data, l_max, r_max)
        if l_bst and r_bst and l_max < node.data < r_min:
            return True, low, high, node, l_size + r_size + 1
        if l_size > r_size:
            return False, low, high, l_root, l_size
        return False, low, high, r_root, r_size

    _, _, _, best_root, size = visit(root)
    return best_root, size