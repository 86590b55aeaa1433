"""An unbounded stack built from singly linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional[_Node] = None


class ListStack:
    """Last-in, first-out stack whose top is the head of a linked list."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def _top(self, action: str) -> _Node:
        if self._head is None:
            raise IndexError(f"{action} empty stack")
        return self._head

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return self._head is None

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        self._head = _Node(data, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Unlink the top node and return its item."""
        top = self._top("pop from")
        self._head = top.next
        self._size -= 1
        return top.data

    def peek(self) -> Any:
        """Return the item of the top node."""
        return self._top("peek at").data

    def __len__(self) -> int:
        return self._size