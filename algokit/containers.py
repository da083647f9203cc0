"""Simple container types: disjoint-set seed, FIFO queue and LIFO stack."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class DSU:
    """Disjoint-set structure where every element starts as its own parent."""

    def __init__(self, n: int) -> None:
        self.parents: list[int] = list(range(n))

    def __len__(self) -> int:
        return len(self.parents)

    def __repr__(self) -> str:
        return f"DSU(parents={self.parents!r})"


class Queue(Generic[T]):
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> T | None:
        """Return the front item, or None when empty."""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        return not self._items


class Stack(Generic[T]):
    """Last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def push(self, item: T) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> T | None:
        """Remove and return the top item, or None when empty."""
        return self._items.pop() if self._items else None

    def peek(self) -> T:
        """Return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items