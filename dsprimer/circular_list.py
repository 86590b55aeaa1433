"""A circular singly linked list with a cursor that wraps around."""

from __future__ import annotations

from typing import Any, Optional

from dsprimer.linked_list import _Cursor
from dsprimer.list_stack import _Node


class CircularList(_Cursor):
    """Ring of items reached through its tail, traversed by a cursor.

    ``insert`` adds at the end, ``insert_front`` at the start. ``first`` puts
    the cursor on the first item; ``next`` advances it and wraps around
    forever. ``remove`` deletes the item under the cursor.
    """

    def __init__(self) -> None:
        super().__init__()
        self._tail: Optional[_Node] = None

    def _link_after_tail(self, data: Any) -> _Node:
        if self._tail is None:
            node = _Node(data)
            node.next = node
            self._size += 1
            return node
        return self._link(self._tail, data)

    def _ring_tail(self) -> _Node:
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail

    def insert(self, data: Any) -> None:
        """Add ``data`` after the last item."""
        self._tail = self._link_after_tail(data)

    def insert_front(self, data: Any) -> None:
        """Add ``data`` before the first item."""
        node = self._link_after_tail(data)
        if self._tail is None:
            self._tail = node

    def first(self) -> Any:
        """Put the cursor on the node after the tail and return its item."""
        tail = self._ring_tail()
        return self._land(tail, tail.next)

    def next(self) -> Any:
        """Advance the cursor, wrapping past the last item, and return its item."""
        self._ring_tail()
        if self._cur is None:
            raise IndexError("cursor is not placed; call first()")
        return self._land(self._cur, self._cur.next)

    def remove(self) -> Any:
        """Delete and return the item under the cursor."""
        node = self._current()
        if node is self._tail:
            self._tail = None if node.next is node else self._before
        data = self._unlink()
        if self._tail is None:
            self._cur = self._before = None
        return data

    def __len__(self) -> int:
        return self._size