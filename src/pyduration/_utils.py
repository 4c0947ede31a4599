"""Rounding and division helpers shared by the conversion modules."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable

_LARGEST_FINITE_INT = int(sys.float_info.max)


def floor_towards_zero(value: float) -> int | float:
    """Like ``math.floor``, but rounds negative numbers towards zero.

    Finite values come back as ``int``, so a zero result is never ``-0.0``.
    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.trunc(value)


def fit_float_range(value: int | float) -> int | float:
    """Replace an int too large for a float with a signed infinity.

    Ints that fit are returned unchanged so integral arithmetic stays exact.
    """
    if isinstance(value, int) and abs(value) > _LARGEST_FINITE_INT:
        return math.inf if value > 0 else -math.inf
    return value


def sum_within_float_range(values: Iterable[int | float]) -> int | float:
    """Sum ints exactly, or as floats once any term is a float.

    Float addition overflows to infinity where mixing a huge int with a
    float would raise OverflowError.
    """
    terms = [fit_float_range(value) for value in values]
    if all(isinstance(term, int) for term in terms):
        return fit_float_range(sum(terms))
    return sum(float(term) for term in terms)


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator
