"""Duration value types and the ordered unit table."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields

from pyduration._constants import (
    MILLISECONDS_IN_A_DAY,
    MILLISECONDS_IN_A_MINUTE,
    MILLISECONDS_IN_A_MONTH,
    MILLISECONDS_IN_A_SECOND,
    MILLISECONDS_IN_A_WEEK,
    MILLISECONDS_IN_A_YEAR,
    MILLISECONDS_IN_AN_HOUR,
)
from pyduration._errors import ERR_MSG_INVALID_FIELD_VALUE, InvalidDurationTypeError

Number = int | float


def is_number(value: object) -> bool:
    """True for ints and floats; bools are rejected even though they are ints."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Unit(enum.StrEnum):
    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"


UNITS: tuple[tuple[Unit, int], ...] = (
    (Unit.YEARS, MILLISECONDS_IN_A_YEAR),
    (Unit.MONTHS, MILLISECONDS_IN_A_MONTH),
    (Unit.WEEKS, MILLISECONDS_IN_A_WEEK),
    (Unit.DAYS, MILLISECONDS_IN_A_DAY),
    (Unit.HOURS, MILLISECONDS_IN_AN_HOUR),
    (Unit.MINUTES, MILLISECONDS_IN_A_MINUTE),
    (Unit.SECONDS, MILLISECONDS_IN_A_SECOND),
    (Unit.MILLISECONDS, 1),
)
"""Units paired with their length in milliseconds, largest first."""

UNIT_FACTORS: dict[Unit, int] = dict(UNITS)

UNIT_NAMES: frozenset[str] = frozenset(unit.value for unit in Unit)


@dataclass(frozen=True)
class Duration:
    """A duration broken down into calendar-free components.

    Fields may be fractional or of mixed sign when built by hand or parsed;
    ``normalize()`` always returns integral fields sharing one sign.
    """

    years: Number = 0
    months: Number = 0
    weeks: Number = 0
    days: Number = 0
    hours: Number = 0
    minutes: Number = 0
    seconds: Number = 0
    milliseconds: Number = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not is_number(value):
                raise InvalidDurationTypeError(
                    ERR_MSG_INVALID_FIELD_VALUE,
                    f"field {f.name!r} has non-numeric value of type {type(value).__name__}",
                )

    def as_dict(self) -> dict[str, Number]:
        return asdict(self)


ZERO = Duration()

DurationInput = str | Number | Mapping[str, Number] | Duration
"""Anything accepted where a duration is expected."""
