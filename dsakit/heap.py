"""A binary max-heap stored in a list."""

from __future__ import annotations


class MaxHeap:
    """A max-heap where every parent is at least as large as its children."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def insert(self, value: int) -> None:
        """Add ``value`` and sift it up to its place."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def to_list(self) -> list[int]:
        """Return the elements in heap (array) order, the largest first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)