"""Binary search tree insertion and the classic binary tree traversals."""

from __future__ import annotations

from collections import deque

from algokit.binary_tree import BinaryNode


def bst_insert(
    root: BinaryNode | None, value: int, allow_duplicates: bool = False
) -> BinaryNode:
    """Insert ``value`` and return the root.

    Equal values go to the right subtree when ``allow_duplicates`` is true and
    are ignored otherwise.
    """
    node = BinaryNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.data:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        elif value > current.data or allow_duplicates:
            if current.right is None:
                current.right = node
                return root
            current = current.right
        else:
            return root


def inorder(root: BinaryNode | None) -> list[int]:
    """Values in left, root, right order."""
    result: list[int] = []
    stack: list[BinaryNode] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.data)
        current = current.right
    return result


def preorder(root: BinaryNode | None) -> list[int]:
    """Values in root, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: BinaryNode | None) -> list[int]:
    """Values in left, right, root order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result


def level_order(root: BinaryNode | None) -> list[int]:
    """Values level by level, each level from left to right."""
    result: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def morris_inorder(root: BinaryNode | None) -> list[int]:
    """In-order values found with threaded links, without a stack.

    The temporary links are removed again, so the tree is left unchanged.
    """
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.data)
            current = current.right
            continue
        previous = current.left
        while previous.right is not None and previous.right is not current:
            previous = previous.right
        if previous.right is None:
            previous.right = current
            current = current.left
        else:
            previous.right = None
            result.append(current.data)
            current = current.right
    return result


def height(root: BinaryNode | None) -> int:
    """Number of nodes on the longest path from the root down to a leaf."""
    levels = 0
    queue = deque([root] if root is not None else [])
    while queue:
        levels += 1
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
    return levels