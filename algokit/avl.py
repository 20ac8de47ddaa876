"""A self-balancing AVL search tree with insertion, deletion and lookup."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    key: int
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, key: int) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node
    return _rebalance(node)


def _delete(node: _Node | None, key: int) -> _Node | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right = _delete(node.right, successor.key)
    return _rebalance(node)


class AVLTree:
    """A set of distinct keys kept in a height-balanced binary search tree."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add ``key``; a key already present is left alone."""
        self._root = _insert(self._root, key)

    def delete(self, key: int) -> None:
        """Remove ``key`` if it is present."""
        self._root = _delete(self._root, key)

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if node.key == key:
                return True
            node = node.left if node.key > key else node.right  # type: ignore[operator]
        return False

    def preorder(self) -> list[int]:
        """Keys in root, left, right order."""
        result: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result