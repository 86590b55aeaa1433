"""A fixed-size ring-buffer queue that leaves one slot unused."""

from __future__ import annotations

from typing import Any

QUE_LEN = 100


class CircularQueue:
    """First-in, first-out queue over ``size`` slots; holds ``size - 1`` items."""

    def __init__(self, size: int = QUE_LEN) -> None:
        if size < 2:
            raise ValueError("size must be at least 2")
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    @property
    def capacity(self) -> int:
        """The largest number of items the queue can hold."""
        return len(self._slots) - 1

    def _next_pos(self, pos: int) -> int:
        return (pos + 1) % len(self._slots)

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return self._front == self._rear

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the back of the queue."""
        nxt = self._next_pos(self._rear)
        if nxt == self._front:
            raise OverflowError("queue is full")
        self._rear = nxt
        self._slots[nxt] = data

    def dequeue(self) -> Any:
        """Remove and return the item at the front of the queue."""
        if self.is_empty():
            raise IndexError("dequeue from empty queue")
        self._front = self._next_pos(self._front)
        data = self._slots[self._front]
        self._slots[self._front] = None
        return data

    def peek(self) -> Any:
        """Return the item at the front of the queue without removing it."""
        if self.is_empty():
            raise IndexError("peek at empty queue")
        return self._slots[self._next_pos(self._front)]

    def __len__(self) -> int:
        return (self._rear - self._front) % len(self._slots)