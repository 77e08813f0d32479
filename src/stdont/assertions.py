"""
Assertions with "expected value" semantics.

``expect_eq(expected, actual)`` is ``assert expected == actual`` that says
which side was which when it fails. It raises explicitly, so it still runs
under ``python -O``.

Failure message::

    assertion failed: `(expected == actual)`
    expected: 2
      actual: 3
"""

from __future__ import annotations

from typing import Any

from stdont.errors import ExpectationError


def expect_eq(expected: Any, actual: Any) -> None:
    """Raise ExpectationError (an AssertionError) unless ``expected == actual``."""
    if not expected == actual:
        raise ExpectationError(
            "assertion failed: `(expected == actual)`\n"
            f"expected: {expected!r}\n"
            f"  actual: {actual!r}",
            expected=expected,
            actual=actual,
        )


__all__ = ["expect_eq"]
