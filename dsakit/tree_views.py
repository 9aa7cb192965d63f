"""Views of a binary tree: its boundary, its silhouettes and level orders."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from dsakit.tree import Node


def _breadth_first(root: Node | None) -> Iterator[tuple[Node, int, int]]:
    """Yield (node, horizontal distance, level) in breadth-first order."""
    if root is None:
        return
    pending = deque([(root, 0, 0)])
    while pending:
        node, distance, level = pending.popleft()
        yield node, distance, level
        if node.left is not None:
            pending.append((node.left, distance - 1, level + 1))
        if node.right is not None:
            pending.append((node.right, distance + 1, level + 1))


def _leaves(node: Node | None) -> Iterator[int]:
    if node is None:
        return
    if node.is_leaf:
        yield node.data
        return
    yield from _leaves(node.left)
    yield from _leaves(node.right)


def boundary(root: Node | None) -> list[int]:
    """Return the tree's boundary anticlockwise from the root.

    The left edge (without its leaf) comes first, then every leaf from left to
    right, then the right edge (without its leaf) from the bottom up.
    """
    if root is None:
        return []
    result = [root.data]

    node = root.left
    while node is not None and not node.is_leaf:
        result.append(node.data)
        node = node.left if node.left is not None else node.right

    result.extend(_leaves(root.left))
    result.extend(_leaves(root.right))

    right_edge = []
    node = root.right
    while node is not None and not node.is_leaf:
        right_edge.append(node.data)
        node = node.right if node.right is not None else node.left
    result.extend(reversed(right_edge))
    return result


def bottom_view(root: Node | None) -> list[int]:
    """Return, left to right, the last node met in breadth-first order at each
    horizontal distance."""
    seen: dict[int, int] = {}
    for node, distance, _ in _breadth_first(root):
        seen[distance] = node.data
    return [seen[distance] for distance in sorted(seen)]


def top_view(root: Node | None) -> list[int]:
    """Return, left to right, the first node met in breadth-first order at each
    horizontal distance."""
    seen: dict[int, int] = {}
    for node, distance, _ in _breadth_first(root):
        seen.setdefault(distance, node.data)
    return [seen[distance] for distance in sorted(seen)]


def left_view(root: Node | None) -> list[int]:
    """Return the leftmost node of every level, top to bottom."""
    seen: dict[int, int] = {}
    for node, _, level in _breadth_first(root):
        seen.setdefault(level, node.data)
    return [seen[level] for level in sorted(seen)]


def right_view(root: Node | None) -> list[int]:
    """Return the rightmost node of every level, top to bottom."""
    seen: dict[int, int] = {}
    for node, _, level in _breadth_first(root):
        seen[level] = node.data
    return [seen[level] for level in sorted(seen)]


def vertical_order(root: Node | None) -> list[int]:
    """Return the nodes column by column from left to right; within a column,
    top to bottom, and left to right within a level."""
    # Breadth-first order already runs level by level, so a stable sort on the
    # column keeps each column's nodes in level order.
    entries = sorted(_breadth_first(root), key=lambda entry: entry[1])
    return [node.data for node, _, _ in entries]


def zigzag(root: Node | None) -> list[int]:
    """Return the nodes level by level, alternating left-to-right and
    right-to-left, starting left-to-right."""
    result: list[int] = []
    current = [root] if root is not None else []
    left_to_right = True
    while current:
        values = [node.data for node in current]
        result.extend(values if left_to_right else reversed(values))
        left_to_right = not left_to_right
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return result