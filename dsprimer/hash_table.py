"""A simple fixed-size hash table without collision handling."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Optional

STR_LEN = 50
MAX_TBL = 100


@dataclass
class Person:
    """A person record keyed by a registration number."""

    ssn: int
    name: str
    addr: str

    def __post_init__(self) -> None:
        for field_name in ("name", "addr"):
            if len(getattr(self, field_name)) >= STR_LEN:
                raise ValueError(f"{field_name} must be shorter than {STR_LEN} characters")

    def describe(self) -> str:
        """Return the person's details, one per line."""
        return f"SSN: {self.ssn}\nName: {self.name}\nAddress: {self.addr}\n"


class SlotStatus(enum.Enum):
    """State of a table slot."""

    EMPTY = enum.auto()
    DELETED = enum.auto()
    INUSE = enum.auto()


@dataclass
class _Slot:
    key: Any = None
    value: Any = None
    status: SlotStatus = SlotStatus.EMPTY


class Table:
    """Table of ``size`` slots; each key maps straight to the slot its hash names.

    Keys with the same hash share one slot: a later insert overwrites it.
    """

    def __init__(self, hash_func: Callable[[Any], int], size: int = MAX_TBL) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._hash = hash_func
        self._slots = [_Slot() for _ in range(size)]

    def _slot(self, key: Any) -> _Slot:
        index = self._hash(key)
        if not 0 <= index < len(self._slots):
            raise ValueError(f"hash value {index} is outside the table")
        return self._slots[index]

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``."""
        slot = self._slot(key)
        slot.key = key
        slot.value = value
        slot.status = SlotStatus.INUSE

    def delete(self, key: Any) -> Optional[Any]:
        """Mark the slot for ``key`` deleted and return its value, or None."""
        slot = self._slot(key)
        if slot.status is not SlotStatus.INUSE:
            return None
        slot.status = SlotStatus.DELETED
        return slot.value

    def search(self, key: Any) -> Optional[Any]:
        """Return the value in the slot for ``key``, or None if it is not in use."""
        slot = self._slot(key)
        if slot.status is not SlotStatus.INUSE:
            return None
        return slot.value