"""A bounded list with a cursor used for traversal and removal."""

from __future__ import annotations

from typing import Any, Iterator

from dsprimer.array_stack import _Bounded

LIST_LEN = 100


class ArrayList(_Bounded):
    """Sequence of at most ``capacity`` items with a movable cursor.

    ``first`` places the cursor on the first item, ``next`` advances it, and
    ``remove`` deletes the item under the cursor and steps the cursor back.
    """

    def __init__(self, capacity: int = LIST_LEN) -> None:
        super().__init__(capacity)
        self._cursor = -1

    def insert(self, data: Any) -> None:
        """Append ``data`` to the end of the list."""
        self._append(data, "list")

    def first(self) -> Any:
        """Move the cursor to the first item and return it."""
        if not self._items:
            raise IndexError("list is empty")
        self._cursor = 0
        return self._items[0]

    def next(self) -> Any:
        """Advance the cursor and return the item it lands on."""
        if self._cursor >= len(self._items) - 1:
            raise IndexError("no more items")
        self._cursor += 1
        return self._items[self._cursor]

    def remove(self) -> Any:
        """Delete and return the item under the cursor."""
        if not 0 <= self._cursor < len(self._items):
            raise IndexError("no item under the cursor")
        data = self._items.pop(self._cursor)
        self._cursor -= 1
        return data

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))