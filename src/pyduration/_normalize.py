"""Largest-unit-first decomposition of a duration."""

from __future__ import annotations

from pyduration._conversion import to_milliseconds
from pyduration._types import UNITS, Duration, DurationInput
from pyduration._utils import floor_towards_zero


def normalize(value: DurationInput) -> Duration:
    """Express a duration in the most appropriate units.

    Works greedily from years down to milliseconds, truncating towards zero
    at each step so every non-zero field shares the sign of the total.
    The input is collapsed to milliseconds first, so how it apportioned
    its units does not matter. Sub-millisecond remainders are dropped.

    Example:
        normalize({"milliseconds": 4000})
        # Duration(years=0, months=0, weeks=0, days=0,
        #          hours=0, minutes=0, seconds=4, milliseconds=0)

        normalize({"days": -1, "milliseconds": 1})
        # Duration(..., days=0, hours=-23, minutes=-59,
        #          seconds=-59, milliseconds=-999)
    """
    remainder = to_milliseconds(value)
    components = {}

    for unit, factor in UNITS:
        count = floor_towards_zero(remainder / factor)
        components[unit.value] = count
        remainder -= count * factor

    return Duration(**components)
