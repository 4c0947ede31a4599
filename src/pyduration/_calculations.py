"""Arithmetic on durations, carried out on the millisecond value."""

from __future__ import annotations

from dataclasses import fields

from pyduration._coerce import to_duration
from pyduration._conversion import to_milliseconds
from pyduration._types import Duration, DurationInput, Number
from pyduration._utils import fit_float_range, ieee_divide, sum_within_float_range


def add(a: DurationInput, b: DurationInput) -> Number:
    """Sum of two durations, in milliseconds.

    Example:
        add({"days": 1}, "PT12H")  # 129600000
    """
    return sum_within_float_range((to_milliseconds(a), to_milliseconds(b)))


def subtract(a: DurationInput, b: DurationInput) -> Number:
    """Difference ``a - b``, in milliseconds."""
    return sum_within_float_range((to_milliseconds(a), -to_milliseconds(b)))


def multiply(value: DurationInput, multiplier: Number) -> Number:
    """Scale a duration, in milliseconds."""
    return fit_float_range(to_milliseconds(value) * fit_float_range(multiplier))


def divide(value: DurationInput, divisor: Number) -> Number:
    """Divide a duration, in milliseconds.

    Division by zero gives ``inf``, ``-inf`` or ``nan`` like IEEE-754
    floats instead of raising.
    """
    return ieee_divide(to_milliseconds(value), fit_float_range(divisor))


def negate(value: DurationInput) -> Duration:
    """Flip the sign of every field without normalizing."""
    duration = to_duration(value)
    return Duration(**{f.name: -getattr(duration, f.name) or 0 for f in fields(duration)})


def absolute(value: DurationInput) -> Duration:
    """The duration itself, or its negation when its total is negative."""
    if to_milliseconds(value) < 0:
        return negate(value)
    return to_duration(value)
