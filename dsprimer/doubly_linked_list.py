"""A doubly linked list that grows at its head and walks both ways."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from dsprimer.list_stack import _Node as _Link


@dataclass(eq=False)
class _Node(_Link):
    prev: Optional[_Node] = None


class DoublyLinkedList:
    """Items are added at the head; a cursor moves forward and backward."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._cur: Optional[_Node] = None
        self._count = 0

    def _move(self, target: Optional[_Node], what: str) -> Any:
        if target is None:
            raise IndexError(f"no {what} item")
        self._cur = target
        return target.data

    def insert(self, data: Any) -> None:
        """Add ``data`` in front of the current head."""
        node = _Node(data, self._head)
        if self._head is not None:
            self._head.prev = node
        self._head = node
        self._count += 1

    def first(self) -> Any:
        """Jump to the head and return its item."""
        return self._move(self._head, "first")

    def next(self) -> Any:
        """Step toward the tail and return the item reached."""
        return self._move(self._cur.next if self._cur else None, "next")

    def previous(self) -> Any:
        """Step back toward the head and return the item reached."""
        return self._move(self._cur.prev if self._cur else None, "previous")

    def __len__(self) -> int:
        return self._count