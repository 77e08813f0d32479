"""Tests for stdont.assertions module."""

import pytest

from stdont.assertions import expect_eq
from stdont.errors import ErrorCategory, ExpectationError


class TestExpectEq:
    def test_equal_passes(self):
        expect_eq(2, 2)
        expect_eq([1, "a"], [1, "a"])

    def test_message(self):
        with pytest.raises(AssertionError) as exc_info:
            expect_eq(2, 3)
        assert str(exc_info.value) == (
            "assertion failed: `(expected == actual)`\nexpected: 2\n  actual: 3"
        )

    def test_message_uses_repr(self):
        with pytest.raises(ExpectationError, match="expected: 'a'\n  actual: 'b'"):
            expect_eq("a", "b")

    def test_error_carries_values(self):
        with pytest.raises(ExpectationError) as exc_info:
            expect_eq({"k": 1}, {"k": 2})
        assert exc_info.value.expected == {"k": 1}
        assert exc_info.value.actual == {"k": 2}
        assert exc_info.value.category == ErrorCategory.ASSERTION
