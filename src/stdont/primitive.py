"""
Boolean combinators.

Material implication and its converse, written as functions because
``bool`` cannot grow methods.

Examples:
    >>> implies(False, False), implies(False, True), implies(True, False), implies(True, True)
    (True, True, False, True)
    >>> implied_by(False, False), implied_by(False, True), implied_by(True, False), implied_by(True, True)
    (True, False, True, True)

Tags:
    bool, logic, implication, stdont
"""


def implies(a: bool, b: bool) -> bool:
    """Logical implication, equivalent to ``not a or b``."""
    return not a or bool(b)


def implied_by(a: bool, b: bool) -> bool:
    """Converse of :func:`implies`, equivalent to ``not b or a``."""
    return not b or bool(a)


__all__ = ["implies", "implied_by"]
