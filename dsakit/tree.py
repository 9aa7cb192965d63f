"""Binary trees: building, traversing and measuring them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

# Marks an absent child in the input sequences of the builders.
NULL_MARKER = -1


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Optional[Node] = None
    right: Optional[Node] = None

    @property
    def is_leaf(self) -> bool:
        """Tell whether the node has no children."""
        return self.left is None and self.right is None


def _next_value(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("input ended before the tree was complete") from None


def build_tree_preorder(values: Iterable[int]) -> Node | None:
    """Build a tree from values in pre-order, with -1 marking an absent node."""
    stream = iter(values)

    def build() -> Node | None:
        data = _next_value(stream)
        if data == NULL_MARKER:
            return None
        node = Node(data)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_tree_level_order(values: Iterable[int]) -> Node:
    """Build a tree from values given level by level.

    The first value is the root; then, for every node in breadth-first order,
    a left and a right value follow, with -1 meaning no child there.
    """
    stream = iter(values)
    root = Node(_next_value(stream))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = _next_value(stream)
        if left != NULL_MARKER:
            node.left = Node(left)
            pending.append(node.left)
        right = _next_value(stream)
        if right != NULL_MARKER:
            node.right = Node(right)
            pending.append(node.right)
    return root


def level_order(root: Node | None) -> list[list[int]]:
    """Return the values of the tree level by level, each level left to right."""
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


def in_order(root: Node | None) -> list[int]:
    """Return the values in left, node, right order."""
    if root is None:
        return []
    return [*in_order(root.left), root.data, *in_order(root.right)]


def pre_order(root: Node | None) -> list[int]:
    """Return the values in node, left, right order."""
    if root is None:
        return []
    return [root.data, *pre_order(root.left), *pre_order(root.right)]


def post_order(root: Node | None) -> list[int]:
    """Return the values in left, right, node order."""
    if root is None:
        return []
    return [*post_order(root.left), *post_order(root.right), root.data]


def height(root: Node | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _diameter_and_height(node: Node | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_diameter, left_height = _diameter_and_height(node.left)
    right_diameter, right_height = _diameter_and_height(node.right)
    through = left_height + right_height + 1
    return (
        max(through, left_diameter, right_diameter),
        max(left_height, right_height) + 1,
    )


def diameter(root: Node | None) -> int:
    """Return the number of nodes on the longest path between any two nodes."""
    return _diameter_and_height(root)[0]


def _balanced_and_height(node: Node | None) -> tuple[bool, int]:
    if node is None:
        return True, 0
    left_ok, left_height = _balanced_and_height(node.left)
    right_ok, right_height = _balanced_and_height(node.right)
    balanced = left_ok and right_ok and abs(left_height - right_height) <= 1
    return balanced, max(left_height, right_height) + 1


def is_balanced(root: Node | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_and_height(root)[0]


def is_identical(first: Node | None, second: Node | None) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    if first is None or second is None:
        return first is None and second is None
    return (
        first.data == second.data
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def _sum_tree(node: Node | None) -> tuple[bool, int]:
    if node is None:
        return True, 0
    if node.is_leaf:
        return True, node.data
    left_ok, left_sum = _sum_tree(node.left)
    if not left_ok:
        return False, 0
    right_ok, right_sum = _sum_tree(node.right)
    if not right_ok or left_sum + right_sum != node.data:
        return False, 0
    return True, 2 * node.data


def is_sum_tree(root: Node | None) -> bool:
    """Tell whether every inner node equals the sum of the values below it."""
    return _sum_tree(root)[0]


def count_leaves(root: Node | None) -> int:
    """Return the number of nodes without children."""
    if root is None:
        return 0
    if root.is_leaf:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def lowest_common_ancestor(root: Node | None, n1: int, n2: int) -> Node | None:
    """Return the lowest node having nodes valued ``n1`` and ``n2`` beneath it.

    A node holding one of the values counts as its own ancestor. When only one
    value is present its node is returned; when neither is, None.
    """
    if root is None:
        return None
    if root.data in (n1, n2):
        return root
    left = lowest_common_ancestor(root.left, n1, n2)
    right = lowest_common_ancestor(root.right, n1, n2)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _with_and_without(node: Node | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_with, left_without = _with_and_without(node.left)
    right_with, right_without = _with_and_without(node.right)
    including = node.data + left_without + right_without
    excluding = max(left_with, left_without) + max(right_with, right_without)
    return including, excluding


def max_non_adjacent_sum(root: Node | None) -> int:
    """Return the largest sum of values with no parent and child both chosen."""
    return max(_with_and_without(root))


def _path_to(node: Node | None, target: int) -> list[Node] | None:
    if node is None:
        return None
    if node.data == target:
        return [node]
    for child in (node.left, node.right):
        path = _path_to(child, target)
        if path is not None:
            return [node, *path]
    return None


def kth_ancestor(root: Node | None, k: int, node: int) -> int | None:
    """Return the value ``k`` generations above the first node valued ``node``.

    Returns None when the node is absent or has fewer than ``k`` ancestors.
    """
    if k < 1:
        return None
    path = _path_to(root, node)
    if path is None or k >= len(path):
        return None
    return path[-1 - k].data