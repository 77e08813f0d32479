"""
Result envelope with Display-style unwrapping.

Python has no built-in Result type, so this module provides a minimal one
(``Ok`` / ``Err``) and the operations stdont adds on top of it:
``unwrap_display`` and ``expect_display``. They behave like ``unwrap`` and
``expect`` but render the error with ``str()`` (its human-readable form)
instead of ``repr()``.

Manifesto:
    - **Explicit aborts:** Unwrapping an ``Err`` is a request to abort, so it
      raises ``UnwrapError`` rather than returning a sentinel
    - **Stable messages:** The abort text is fixed so tests and log
      pipelines can match it literally
    - **Blame the caller:** ``UnwrapError.location`` is the line that asked
      for the unwrap

Architecture:
    ::

        ┌──────────────────────────┬──────────────────────────┐
        │          Ok[T]           │          Err[E]          │
        ├──────────────────────────┼──────────────────────────┤
        │ value: T                 │ error: E                 │
        │ unwrap_display() → T     │ unwrap_display() raises  │
        │ expect_display(m) → T    │ expect_display(m) raises │
        └──────────────────────────┴──────────────────────────┘

        Err(e).unwrap_display()    → "called `Result::unwrap()` on an error: {e}"
        Err(e).expect_display(msg) → "{msg}: {e}"

Examples:
    >>> Ok(2).unwrap_display()
    2
    >>> expect_display(Ok("config"), "Testing expect")
    'config'
    >>> Ok(10).map(lambda x: x * 2).unwrap()
    20
    >>> Err(ValueError("oops")).map(lambda x: x * 2).unwrap_or(0)
    0

Guardrails:
    ❌ DON'T: Call unwrap_display() where the Err branch is reachable
    ✅ DO: Pattern match and handle ``Err`` explicitly

    ❌ DON'T: Enable STDONT_LOG_UNWRAP_FAILURES without configure_logging()
    ✅ DO: Configure structlog first; unconfigured, it prints to stdout

Usage:
    from stdont.result import Ok, Err, Result

    def parse_port(raw: str) -> Result[int, ValueError]:
        try:
            return Ok(int(raw))
        except ValueError as e:
            return Err(e)

    match parse_port(text):
        case Ok(port):
            serve(port)
        case Err(error):
            log_error(error)

Tags:
    result-pattern, unwrap, display, error-handling, stdont
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar

from pydantic import ValidationError

from stdont.errors import CallerLocation, UnwrapError
from stdont.logging import get_logger
from stdont.settings import get_settings

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")

UNWRAP_PREFIX = "called `Result::unwrap()` on an error: "


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:
        return self.value

    def unwrap_display(self) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def expect_display(self, message: str) -> T:
        """Get the value. Safe for Ok."""
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the value if Ok."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], F]) -> Ok[T]:
        """No-op for Ok."""
        return self

    def and_then(self, f: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        """Chain to another Result-returning function."""
        return f(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """
    Failed result containing an error.

    ``error`` is usually an exception, but any value with a meaningful
    ``str()`` works.

    Examples:
        >>> err = Err(ValueError("something went wrong"))
        >>> err.is_err()
        True
        >>> err.unwrap_or("default")
        'default'
        >>> err.map_err(lambda e: f"wrapped: {e}")
        Err('wrapped: something went wrong')
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise UnwrapError, rendering the error with ``repr()``."""
        self._abort(f"{UNWRAP_PREFIX}{self.error!r}", 2)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return f(self.error)

    def unwrap_display(self) -> NoReturn:
        """
        Raise UnwrapError, rendering the error with ``str()``.

        Same as ``unwrap()``, but the message uses the error's
        human-readable form, e.g.
        ``called `Result::unwrap()` on an error: oh no!``.
        """
        self._abort(_display_message(self.error), 2)

    def expect_display(self, message: str) -> NoReturn:
        """Raise UnwrapError with ``"{message}: {error}"``."""
        self._abort(_expect_message(message, self.error), 2)

    def map(self, f: Callable[[Any], U]) -> Err[E]:
        """No-op for Err."""
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Transform the error."""
        return Err(f(self.error))

    def and_then(self, f: Callable[[Any], Result[U, Any]]) -> Err[E]:
        """No-op for Err."""
        return self

    def _abort(self, message: str, stacklevel: int) -> NoReturn:
        """
        Raise UnwrapError blaming the frame ``stacklevel`` levels above this one.

        1 is the function that called ``_abort``, 2 is its caller.
        """
        location = CallerLocation.capture(stacklevel + 1)
        error = UnwrapError(message, error=self.error, location=location)
        if _unwrap_logging_enabled():
            get_logger(__name__).warning(
                "unwrap_failed",
                error=str(self.error),
                error_type=type(self.error).__name__,
                location=str(location),
            )
        raise error

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
Result = Ok[T] | Err[E]


# =============================================================================
# FREE FUNCTIONS
# =============================================================================


def unwrap_display(result: Result[T, Any]) -> T:
    """
    Return the ``Ok`` value or raise UnwrapError with the error's ``str()``.

    Function form of :meth:`Err.unwrap_display`; the reported location is
    the caller of this function.
    """
    if isinstance(result, Err):
        result._abort(_display_message(result.error), 2)
    return result.value


def expect_display(result: Result[T, Any], message: str) -> T:
    """Return the ``Ok`` value or raise UnwrapError with ``"{message}: {error}"``."""
    if isinstance(result, Err):
        result._abort(_expect_message(message, result.error), 2)
    return result.value


def _display_message(error: Any) -> str:
    return f"{UNWRAP_PREFIX}{error}"


def _expect_message(message: str, error: Any) -> str:
    return f"{message}: {error}"


def _unwrap_logging_enabled() -> bool:
    # Broken STDONT_* settings must not replace the UnwrapError being raised.
    try:
        return get_settings().log_unwrap_failures
    except ValidationError:
        return False


def try_result(f: Callable[[], T]) -> Result[T, Exception]:
    """
    Execute a function and wrap its outcome in a Result.

    >>> try_result(lambda: int("42"))
    Ok(42)
    >>> try_result(lambda: int("forty-two")).is_err()
    True
    """
    try:
        return Ok(f())
    except Exception as e:
        return Err(e)


__all__ = [
    "Result",
    "Ok",
    "Err",
    "UNWRAP_PREFIX",
    "unwrap_display",
    "expect_display",
    "try_result",
]
