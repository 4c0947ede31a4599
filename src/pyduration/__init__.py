"""pyduration - Convert between milliseconds, ISO-8601 durations and components."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyduration")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from pyduration._calculations import absolute, add, divide, multiply, negate, subtract
from pyduration._coerce import parse, to_duration
from pyduration._conversion import (
    to_days,
    to_hours,
    to_milliseconds,
    to_minutes,
    to_months,
    to_seconds,
    to_unit,
    to_weeks,
    to_years,
)
from pyduration._errors import (
    DurationError,
    DurationParseError,
    InvalidDurationTypeError,
    NonFiniteDurationError,
)
from pyduration._formatter import to_iso_duration
from pyduration._normalize import normalize
from pyduration._parser import parse_iso_duration
from pyduration._predicates import is_equal, is_negative, is_zero
from pyduration._sum import sum_durations
from pyduration._types import UNITS, ZERO, Duration, DurationInput, Unit
from pyduration._utils import floor_towards_zero

__all__ = [
    "parse",
    "parse_iso_duration",
    "to_duration",
    "to_iso_duration",
    "to_milliseconds",
    "to_seconds",
    "to_minutes",
    "to_hours",
    "to_days",
    "to_weeks",
    "to_months",
    "to_years",
    "to_unit",
    "add",
    "subtract",
    "multiply",
    "divide",
    "negate",
    "absolute",
    "sum_durations",
    "normalize",
    "is_zero",
    "is_negative",
    "is_equal",
    "floor_towards_zero",
    "Duration",
    "DurationInput",
    "Unit",
    "UNITS",
    "ZERO",
    "DurationError",
    "DurationParseError",
    "InvalidDurationTypeError",
    "NonFiniteDurationError",
]
