"""A fixed-capacity stack backed by a Python list."""

from __future__ import annotations

from typing import Any

STACK_LEN = 100


class _Bounded:
    """Python list that refuses to grow past a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """The largest number of items that fit."""
        return self._capacity

    def _append(self, data: Any, kind: str) -> None:
        if len(self._items) >= self._capacity:
            raise OverflowError(f"{kind} is full")
        self._items.append(data)


class ArrayStack(_Bounded):
    """Last-in, first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = STACK_LEN) -> None:
        super().__init__(capacity)

    def is_empty(self) -> bool:
        """Return True when nothing has been pushed or everything was popped."""
        return not self._items

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        self._append(data, "stack")

    def pop(self) -> Any:
        """Remove and return the item on top of the stack."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item, leaving it in place."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"