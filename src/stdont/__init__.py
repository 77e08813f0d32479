"""stdont -- APIs that feel like they should be in the standard library, but are not.

Small combinators over built-in value kinds, written as free functions
because built-in types cannot grow methods.

Architecture::

    primitive.py    implies / implied_by on bool
    option.py       is_none_or on ``T | None``
    result.py       Ok / Err with unwrap_display / expect_display
    vec.py          try_remove / try_swap_remove on list
    path.py         with_ / PathBuf for chainable path joins
    assertions.py   expect_eq
    prelude.py      glob-importable re-exports of the above

    errors.py       StdontError, UnwrapError, ExpectationError
    logging.py      structlog configuration
    settings.py     STDONT_* settings (pydantic-settings)

Examples:
    >>> from stdont import implies, try_remove
    >>> implies(True, False)
    False
    >>> try_remove([1, 2, 3], 7) is None
    True
"""

from stdont.errors import CallerLocation, ErrorCategory, ExpectationError, StdontError, UnwrapError
from stdont.prelude import *  # noqa: F403
from stdont.prelude import __all__ as _prelude_all

__version__ = "0.1.0"

__all__ = [
    *_prelude_all,
    "ErrorCategory",
    "CallerLocation",
    "StdontError",
    "UnwrapError",
    "ExpectationError",
]
