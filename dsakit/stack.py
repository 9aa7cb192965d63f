"""A fixed-capacity stack backed by a list."""

from __future__ import annotations


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class Stack:
    """A last-in, first-out stack that holds at most ``size`` elements."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("stack size must be non-negative")
        self.size = size
        self._items: list[int] = []

    def push(self, element: int) -> None:
        """Put ``element`` on top of the stack."""
        if len(self._items) >= self.size:
            raise StackOverflowError("stack overflow")
        self._items.append(element)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)