"""Binary trees of integers: construction from a pre-order listing and common queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

NULL_MARKER = -1


@dataclass
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Node | None = None
    right: Node | None = None


def build_tree(values: Iterable[int]) -> Node | None:
    """Build a tree from a pre-order listing where -1 marks an absent child.

    Raises ValueError if the listing ends before the tree is complete.
    """
    items = iter(values)

    def build() -> Node | None:
        try:
            value = next(items)
        except StopIteration:
            raise ValueError("ran out of values while building the tree") from None
        if value == NULL_MARKER:
            return None
        node = Node(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def level_order(root: Node | None) -> list[list[int]]:
    """The node values level by level, each level from left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _balance(node: Node | None) -> tuple[bool, int]:
    if node is None:
        return True, 0
    left_ok, left_height = _balance(node.left)
    right_ok, right_height = _balance(node.right)
    balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
    return balanced, max(left_height, right_height) + 1


def is_balanced(root: Node | None) -> bool:
    """Whether every node's subtrees differ in height by at most one."""
    return _balance(root)[0]


def is_identical(first: Node | None, second: Node | None) -> bool:
    """Whether two trees have the same shape and the same values."""
    if first is None or second is None:
        return first is second
    return (
        first.data == second.data
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def count_leaves(root: Node | None) -> int:
    """The number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def height(root: Node | None) -> int:
    """The number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _preorder(node: Node | None) -> Iterator[int]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Node | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def preorder(root: Node | None) -> list[int]:
    """Values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: Node | None) -> list[int]:
    """Values in left, right, node order."""
    return list(_postorder(root))