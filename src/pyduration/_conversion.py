"""Conversion of duration inputs to a count of a single unit."""

from __future__ import annotations

from pyduration._coerce import to_duration
from pyduration._errors import ERR_MSG_UNKNOWN_UNIT, InvalidDurationTypeError
from pyduration._types import UNIT_FACTORS, UNITS, DurationInput, Number, Unit, is_number
from pyduration._utils import fit_float_range, sum_within_float_range


def to_milliseconds(value: DurationInput) -> Number:
    """Total length of a duration in milliseconds.

    Years and months count as 365.25 days and a twelfth of that. Totals
    beyond the float range become a signed infinity.
    """
    if is_number(value):
        return fit_float_range(value)
    duration = to_duration(value)
    return sum_within_float_range(
        getattr(duration, unit.value) * factor for unit, factor in UNITS
    )


def to_unit(value: DurationInput, unit: Unit | str) -> float:
    """Length of a duration expressed in ``unit`` (possibly fractional)."""
    try:
        factor = UNIT_FACTORS[Unit(unit)]
    except ValueError as e:
        raise InvalidDurationTypeError(
            ERR_MSG_UNKNOWN_UNIT,
            f"unknown duration unit {unit!r}",
            wrapped=e,
        ) from e
    return to_milliseconds(value) / factor


def to_seconds(value: DurationInput) -> float:
    return to_unit(value, Unit.SECONDS)


def to_minutes(value: DurationInput) -> float:
    return to_unit(value, Unit.MINUTES)


def to_hours(value: DurationInput) -> float:
    return to_unit(value, Unit.HOURS)


def to_days(value: DurationInput) -> float:
    return to_unit(value, Unit.DAYS)


def to_weeks(value: DurationInput) -> float:
    return to_unit(value, Unit.WEEKS)


def to_months(value: DurationInput) -> float:
    return to_unit(value, Unit.MONTHS)


def to_years(value: DurationInput) -> float:
    return to_unit(value, Unit.YEARS)
