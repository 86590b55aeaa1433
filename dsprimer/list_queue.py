"""An unbounded queue built from singly linked nodes."""

from __future__ import annotations

from typing import Any, Optional

from dsprimer.list_stack import _Node


class ListQueue:
    """First-in, first-out queue keeping references to both ends of a linked list."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def _front_node(self, action: str) -> _Node:
        if self._front is None:
            raise IndexError(f"{action} empty queue")
        return self._front

    def is_empty(self) -> bool:
        """Return True when nothing is waiting in the queue."""
        return self._front is None

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the back of the queue."""
        node = _Node(data)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the item that has waited longest."""
        node = self._front_node("dequeue from")
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the item that would be dequeued next."""
        return self._front_node("peek at").data

    def __len__(self) -> int:
        return self._size