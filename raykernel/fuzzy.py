#
# PROJECT: raykernel
# MODULE: raykernel/fuzzy.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from numbers import Real

EPSILON = 1e-5


class FuzzyEq:
    """
    Mixin for composite values compared component by component.

    A subclass opts in by yielding its float components from __iter__.
    Two values are fuzzy-equal when they are of the same type and every
    component pair differs by less than EPSILON.
    """
    __slots__ = ()

    def fuzzy_eq(self, other) -> bool:
        if type(other) is not type(self):
            return False
        return all(_float_eq(a, b) for a, b in zip(self, other))

    def fuzzy_ne(self, other) -> bool:
        return not self.fuzzy_eq(other)


def _float_eq(a, b) -> bool:
    return abs(a - b) < EPSILON


def fuzzy_eq(a, b) -> bool:
    """Approximate equality for numbers and FuzzyEq values."""
    if isinstance(a, FuzzyEq):
        return a.fuzzy_eq(b)
    if isinstance(a, Real) and isinstance(b, Real):
        return _float_eq(a, b)
    return False


def fuzzy_ne(a, b) -> bool:
    return not fuzzy_eq(a, b)


def assert_fuzzy_eq(left, right):
    if fuzzy_ne(left, right):
        raise AssertionError(
            f"asserting fuzzy equality. {left!r} is not fuzzy equal to {right!r}")


def assert_fuzzy_ne(left, right):
    if fuzzy_eq(left, right):
        raise AssertionError(
            f"asserting fuzzy in-equality. {left!r} is fuzzy equal to {right!r}")
