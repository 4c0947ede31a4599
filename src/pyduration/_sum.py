"""Summing any number of durations."""

from __future__ import annotations

from pyduration._conversion import to_milliseconds
from pyduration._normalize import normalize
from pyduration._types import Duration, DurationInput
from pyduration._utils import sum_within_float_range


def sum_durations(*values: DurationInput) -> Duration:
    """Add durations together and normalize the total once.

    Example:
        sum_durations({"days": 1}, {"days": 2, "hours": 12})
        # Duration(days=3, hours=12)
    """
    return normalize(sum_within_float_range(to_milliseconds(value) for value in values))
