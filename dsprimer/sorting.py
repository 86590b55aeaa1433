"""Simple comparison sorts."""

from __future__ import annotations

from typing import Any, Iterable


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list of ``values`` in ascending order, using bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list of ``values`` in ascending order, using selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        min_idx = min(range(i, len(items)), key=items.__getitem__)
        if min_idx != i:
            items[i], items[min_idx] = items[min_idx], items[i]
    return items