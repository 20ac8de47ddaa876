"""Binary trees read in level order, and their height and diameter."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from algokit.binary_tree import BinaryNode


def build_level_order(values: Iterable[int | None]) -> BinaryNode | None:
    """Build a tree from values in level order, where None marks a missing child.

    Each node takes the next two values as its left and right children;
    running out of values leaves the remaining children missing.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = BinaryNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, None)
        if left is not None:
            node.left = BinaryNode(left)
            pending.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = BinaryNode(right)
            pending.append(node.right)
    return root


def height_and_diameter(root: BinaryNode | None) -> tuple[int, int]:
    """Height in nodes and diameter in edges, computed in one pass."""
    if root is None:
        return 0, 0
    left_height, left_diameter = height_and_diameter(root.left)
    right_height, right_diameter = height_and_diameter(root.right)
    return (
        max(left_height, right_height) + 1,
        max(left_diameter, right_diameter, left_height + right_height),
    )


def diameter(root: BinaryNode | None) -> int:
    """Number of edges on the longest path between two nodes."""
    return height_and_diameter(root)[1]