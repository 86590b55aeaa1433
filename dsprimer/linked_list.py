"""A singly linked list with a dummy head, a cursor and an optional sort rule."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from dsprimer.list_stack import _Node


class _Cursor:
    """Cursor over singly linked nodes: the current node and the one before it."""

    def __init__(self) -> None:
        self._cur: Optional[_Node] = None
        self._before: Optional[_Node] = None
        self._can_remove = False
        self._size = 0

    def _land(self, before: _Node, node: Any) -> Any:
        self._before = before
        self._cur = node
        self._can_remove = True
        return node.data

    def _current(self) -> _Node:
        if not self._can_remove or self._cur is None or self._before is None:
            raise IndexError("no item under the cursor")
        return self._cur

    def _link(self, pred: _Node, data: Any) -> _Node:
        node = _Node(data, pred.next)
        if self._can_remove and self._cur is pred.next:
            self._before = node
        pred.next = node
        self._size += 1
        return node

    def _unlink(self) -> Any:
        node = self._current()
        before = self._before
        assert before is not None
        before.next = node.next
        self._cur = before
        self._can_remove = False
        self._size -= 1
        node.next = None
        return node.data


class LinkedList(_Cursor):
    """Linked list that inserts at the front, or in order once a rule is set.

    A sort rule ``comp(d1, d2)`` returns true when ``d1`` belongs before
    ``d2``; a new item goes before the first item it belongs before.
    """

    def __init__(self) -> None:
        super().__init__()
        self._head = _Node(None)
        self._comp: Optional[Callable[[Any, Any], Any]] = None

    def set_sort_rule(self, comp: Callable[[Any, Any], Any]) -> None:
        """Use ``comp`` to place items inserted from now on."""
        self._comp = comp

    def insert(self, data: Any) -> None:
        """Add ``data`` at the front, or at its place under the sort rule."""
        pred = self._head
        if self._comp is not None:
            while pred.next is not None and not self._comp(data, pred.next.data):
                pred = pred.next
        self._link(pred, data)

    def first(self) -> Any:
        """Move the cursor to the first item and return it."""
        if self._head.next is None:
            raise IndexError("list is empty")
        return self._land(self._head, self._head.next)

    def next(self) -> Any:
        """Advance the cursor and return the item it lands on."""
        if self._cur is None or self._cur.next is None:
            raise IndexError("no more items")
        return self._land(self._cur, self._cur.next)

    def remove(self) -> Any:
        """Delete and return the item under the cursor."""
        return self._unlink()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.data
            node = node.next