"""
Optional value combinators.

An optional value is ``T | None``: ``None`` is the only "absent" value.
Falsy values such as ``0`` or ``""`` are present.

Examples:
    >>> is_none_or(2, lambda x: x > 1)
    True
    >>> is_none_or(0, lambda x: x > 1)
    False
    >>> is_none_or(None, lambda x: x > 1)
    True

Tags:
    optional, none, predicate, stdont
"""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")


def is_none_or(value: T | None, predicate: Callable[[T], bool]) -> bool:
    """
    Return True if ``value`` is None or satisfies ``predicate``.

    The predicate is called at most once, and never for None.
    """
    if value is None:
        return True
    return bool(predicate(value))


__all__ = ["is_none_or"]
