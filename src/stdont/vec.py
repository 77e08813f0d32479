"""
Fallible list removal.

``list.pop(i)`` raises ``IndexError`` and wraps negative indices around.
These helpers return None instead and treat any index outside
``0 <= index < len(items)`` as missing, leaving the list untouched.

Examples:
    >>> items = [10, 20, 30]
    >>> try_remove(items, 1)
    20
    >>> items
    [10, 30]
    >>> try_remove(items, 5) is None
    True
    >>> items
    [10, 30]

    >>> items = [10, 20, 30]
    >>> try_swap_remove(items, 0)
    10
    >>> items
    [30, 20]

Tags:
    list, removal, bounds-check, stdont
"""

from __future__ import annotations

import operator
from typing import TypeVar

T = TypeVar("T")


def _in_bounds(items: list, index: int) -> bool:
    return 0 <= index < len(items)


def try_remove(items: list[T], index: int) -> T | None:
    """Fallible ``items.pop(index)``; preserves the order of the rest."""
    index = operator.index(index)
    if not _in_bounds(items, index):
        return None
    return items.pop(index)


def try_swap_remove(items: list[T], index: int) -> T | None:
    """
    Remove ``items[index]`` by moving the last element into its place.

    O(1), but does not preserve order. Returns None when out of bounds.
    """
    index = operator.index(index)
    if not _in_bounds(items, index):
        return None
    last = items.pop()
    if index == len(items):
        return last
    removed = items[index]
    items[index] = last
    return removed


__all__ = ["try_remove", "try_swap_remove"]
