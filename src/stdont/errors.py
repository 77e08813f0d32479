"""
Structured error types for stdont.

Every helper in stdont is total except the deliberate escape hatches on
Result values (``unwrap``, ``unwrap_display``, ``expect_display``) and the
``expect_eq`` assertion. Those raise typed errors from this module so that
callers and log pipelines can tell a requested abort apart from an
ordinary bug.

Manifesto:
    - **Absence is a value:** ``is_none_or``, ``try_remove`` and
      ``try_swap_remove`` return ``None``/``bool``, they never raise
    - **Aborts are typed:** an unwrap on ``Err`` raises ``UnwrapError``,
      never a bare ``RuntimeError``
    - **Caller attribution:** ``UnwrapError.location`` points at the line
      that asked for the unwrap, not at library internals
    - **Error chaining:** exception payloads are kept as ``__cause__``

Architecture:
    ::

        ┌──────────────────────────────────────────────────────┐
        │                     StdontError                       │
        │          (message, category, cause, to_dict)          │
        ├──────────────────────────────────────────────────────┤
        │  UnwrapError                ExpectationError          │
        │  (UNWRAP, error payload,    (ASSERTION, also an       │
        │   CallerLocation)            AssertionError)          │
        └──────────────────────────────────────────────────────┘

Examples:
    >>> error = StdontError("Something went wrong")
    >>> error.category
    <ErrorCategory.INTERNAL: 'INTERNAL'>
    >>> error.to_dict()["message"]
    'Something went wrong'

    >>> here = CallerLocation("app.py", 12, "main")
    >>> str(here)
    'app.py:12 in main'

Tags:
    error-handling, exception-hierarchy, unwrap, stdont

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and routing.

    Attributes:
        UNWRAP: An ``Err`` was unwrapped on purpose
        ASSERTION: An ``expect_eq`` comparison failed
        INTERNAL: Bugs, unexpected state
    """

    UNWRAP = "UNWRAP"
    ASSERTION = "ASSERTION"
    INTERNAL = "INTERNAL"


@dataclass(frozen=True, slots=True)
class CallerLocation:
    """Source position of the code that triggered an abort."""

    filename: str
    lineno: int
    function: str

    @classmethod
    def capture(cls, stacklevel: int = 1) -> CallerLocation:
        """
        Capture the location of a frame on the current call stack.

        ``stacklevel`` counts like ``warnings.warn``: 1 is the function that
        called ``capture``, 2 is its caller, and so on.
        """
        frame = inspect.currentframe()
        for _ in range(stacklevel):
            frame = frame.f_back
        code = frame.f_code
        return cls(code.co_filename, frame.f_lineno, code.co_name)

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno} in {self.function}"


class StdontError(Exception):
    """
    Base exception for all stdont errors.

    Carries a category for routing, an optional chained cause, and a
    ``to_dict()`` rendering for structured logging. Subclasses set
    ``default_category``.

    Examples:
        >>> try:
        ...     raise KeyError("missing")
        ... except KeyError as e:
        ...     error = StdontError("Lookup failed", cause=e)
        >>> error.cause
        KeyError('missing')
        >>> error.__cause__ is error.cause
        True
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class UnwrapError(StdontError):
    """
    Raised when an ``Err`` is unwrapped.

    ``str(error)`` is exactly the abort message, for example
    ``called `Result::unwrap()` on an error: oh no!``. The original ``Err``
    payload is kept in ``error`` and, when it is an exception, chained as
    ``__cause__``. ``location`` is the caller of the unwrapping operation.
    """

    default_category = ErrorCategory.UNWRAP

    def __init__(
        self,
        message: str,
        *,
        error: Any = None,
        location: CallerLocation | None = None,
    ):
        super().__init__(
            message,
            cause=error if isinstance(error, BaseException) else None,
        )
        self.error = error
        self.location = location

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.location is not None:
            result["location"] = str(self.location)
        return result


class ExpectationError(StdontError, AssertionError):
    """
    Raised by ``expect_eq`` when expected and actual values differ.

    Subclasses ``AssertionError`` so test runners report it as a failed
    assertion.
    """

    default_category = ErrorCategory.ASSERTION

    def __init__(self, message: str, *, expected: Any, actual: Any):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


__all__ = [
    "ErrorCategory",
    "CallerLocation",
    "StdontError",
    "UnwrapError",
    "ExpectationError",
]
