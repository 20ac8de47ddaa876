"""N-ary trees built from a depth-first sequence with -1 closing each node."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

END_OF_CHILDREN = -1


@dataclass(eq=False)
class GenericNode:
    """A node of an n-ary tree."""

    data: int
    children: list[GenericNode] = field(default_factory=list)


def build_generic_tree(sequence: Iterable[int]) -> GenericNode:
    """Build a tree from values in depth-first order, where -1 closes the current node."""
    root: GenericNode | None = None
    stack: list[GenericNode] = []
    for value in sequence:
        if value == END_OF_CHILDREN:
            if not stack:
                raise ValueError("unbalanced sequence: too many end markers")
            stack.pop()
            continue
        node = GenericNode(value)
        if stack:
            stack[-1].children.append(node)
        elif root is None:
            root = node
        else:
            raise ValueError("sequence describes more than one root")
        stack.append(node)
    if root is None:
        raise ValueError("sequence holds no nodes")
    return root


def describe(root: GenericNode) -> list[str]:
    """One line per node in preorder, such as ``"10->20, 30, ."``."""
    lines: list[str] = []
    stack = [root]
    while stack:
        node = stack.pop()
        children = "".join(f"{child.data}, " for child in node.children)
        lines.append(f"{node.data}->{children}.")
        stack.extend(reversed(node.children))
    return lines


def _height_and_diameter(node: GenericNode) -> tuple[int, int]:
    tallest = second = -1
    best = 0
    for child in node.children:
        child_height, child_best = _height_and_diameter(child)
        best = max(best, child_best)
        if child_height >= tallest:
            second, tallest = tallest, child_height
        elif child_height >= second:
            second = child_height
    best = max(best, tallest + second + 2)
    return tallest + 1, best


def diameter(root: GenericNode) -> int:
    """Number of edges on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def node_to_root_path(root: GenericNode, key: int) -> list[int]:
    """Values from the node holding ``key`` up to the root, or an empty list."""
    if root.data == key:
        return [root.data]
    for child in root.children:
        path = node_to_root_path(child, key)
        if path:
            path.append(root.data)
            return path
    return []


def distance_between(root: GenericNode, first: int, second: int) -> int:
    """Number of edges between the nodes holding ``first`` and ``second``."""
    first_path = node_to_root_path(root, first)
    second_path = node_to_root_path(root, second)
    if not first_path or not second_path:
        raise ValueError("both values must be present in the tree")
    shared = 0
    for a, b in zip(reversed(first_path), reversed(second_path)):
        if a != b:
            break
        shared += 1
    return len(first_path) + len(second_path) - 2 * shared