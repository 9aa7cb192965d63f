"""Singly, doubly and circular linked lists."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True, eq=False)
class _SinglyNode:
    value: int
    next: Optional[_SinglyNode] = None


@dataclass(slots=True, eq=False)
class _DoublyNode:
    value: int
    next: Optional[_DoublyNode] = None
    prev: Optional[_DoublyNode] = None


class SinglyLinkedList:
    """A singly linked list with head and tail references."""

    def __init__(self, values=()) -> None:
        self._head: _SinglyNode | None = None
        self._tail: _SinglyNode | None = None
        self._length = 0
        for value in values:
            self.insert_last(value)

    def insert_first(self, value: int) -> None:
        """Put ``value`` at the front of the list."""
        node = _SinglyNode(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._length += 1

    def insert_last(self, value: int) -> None:
        """Put ``value`` at the end of the list."""
        node = _SinglyNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def _node_at(self, index: int) -> _SinglyNode:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert_at(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._length:
            raise IndexError("insertion index out of range")
        if index == 0:
            self.insert_first(value)
            return
        if index == self._length:
            self.insert_last(value)
            return
        previous = self._node_at(index - 1)
        previous.next = _SinglyNode(value, previous.next)
        self._length += 1

    def delete_at(self, index: int) -> int:
        """Remove the node at ``index`` and return its value."""
        if not 0 <= index < self._length:
            raise IndexError("deletion index out of range")
        if index == 0:
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(index - 1)
            node = previous.next
            previous.next = node.next
            if node is self._tail:
                self._tail = previous
        node.next = None
        self._length -= 1
        return node.value

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values=()) -> None:
        self._head: _DoublyNode | None = None
        self._tail: _DoublyNode | None = None
        self._length = 0
        for value in values:
            self.insert_last(value)

    def insert_first(self, value: int) -> None:
        """Put ``value`` at the front of the list."""
        node = _DoublyNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._length += 1

    def insert_last(self, value: int) -> None:
        """Put ``value`` at the end of the list."""
        node = _DoublyNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def _node_at(self, index: int) -> _DoublyNode:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert_at(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._length:
            raise IndexError("insertion index out of range")
        if index == 0:
            self.insert_first(value)
            return
        if index == self._length:
            self.insert_last(value)
            return
        previous = self._node_at(index - 1)
        node = _DoublyNode(value, next=previous.next, prev=previous)
        previous.next.prev = node
        previous.next = node
        self._length += 1

    def delete_at(self, index: int) -> int:
        """Remove the node at ``index`` and return its value."""
        if not 0 <= index < self._length:
            raise IndexError("deletion index out of range")
        node = self._node_at(index)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._length -= 1
        return node.value

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularLinkedList:
    """A circular singly linked list addressed through its tail.

    Iteration starts at the node after the tail and ends with the tail.
    """

    def __init__(self) -> None:
        self._tail: _SinglyNode | None = None
        self._length = 0

    def _nodes_from_tail(self) -> Iterator[_SinglyNode]:
        if self._tail is None:
            return
        node = self._tail
        while True:
            yield node
            node = node.next
            if node is self._tail:
                return

    def insert_after(self, element: int, value: int) -> None:
        """Insert ``value`` after the first node holding ``element``.

        The search begins at the tail. On an empty list ``value`` becomes the
        only node and ``element`` is ignored.
        """
        if self._tail is None:
            node = _SinglyNode(value)
            node.next = node
            self._tail = node
            self._length = 1
            return
        for current in self._nodes_from_tail():
            if current.value == element:
                current.next = _SinglyNode(value, current.next)
                self._length += 1
                return
        raise ValueError(f"{element!r} is not in the list")

    def delete(self, value: int) -> None:
        """Remove the first node holding ``value``, searching from the head."""
        if self._tail is None:
            raise ValueError(f"{value!r} is not in the list")
        for previous in self._nodes_from_tail():
            current = previous.next
            if current.value == value:
                break
        else:
            raise ValueError(f"{value!r} is not in the list")
        if current is previous:
            self._tail = None
        else:
            previous.next = current.next
            if current is self._tail:
                self._tail = previous
        current.next = None
        self._length -= 1

    def __iter__(self) -> Iterator[int]:
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            yield node.value
            if node is self._tail:
                return
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"