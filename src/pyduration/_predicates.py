"""Comparisons decided on the millisecond value."""

from __future__ import annotations

from pyduration._conversion import to_milliseconds
from pyduration._types import DurationInput


def is_zero(value: DurationInput) -> bool:
    return to_milliseconds(value) == 0


def is_negative(value: DurationInput) -> bool:
    return to_milliseconds(value) < 0


def is_equal(a: DurationInput, b: DurationInput) -> bool:
    """True when both durations have the same length.

    ``{"hours": 1}`` equals ``"PT60M"``; a month is compared by its
    approximate length, a twelfth of 365.25 days.
    """
    return to_milliseconds(a) == to_milliseconds(b)
