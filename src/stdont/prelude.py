"""Re-exports that are safe to glob-import: ``from stdont.prelude import *``."""

from stdont.assertions import expect_eq
from stdont.option import is_none_or
from stdont.path import PathBuf, with_
from stdont.primitive import implied_by, implies
from stdont.result import Err, Ok, Result, expect_display, try_result, unwrap_display
from stdont.vec import try_remove, try_swap_remove

__all__ = [
    # primitive
    "implies",
    "implied_by",
    # option
    "is_none_or",
    # result
    "Result",
    "Ok",
    "Err",
    "unwrap_display",
    "expect_display",
    "try_result",
    # vec
    "try_remove",
    "try_swap_remove",
    # path
    "with_",
    "PathBuf",
    # assertions
    "expect_eq",
]
