"""Coercion of any accepted duration input to a ``Duration``."""

from __future__ import annotations

from collections.abc import Mapping

from pyduration._errors import (
    ERR_MSG_UNKNOWN_UNIT,
    ERR_MSG_UNSUPPORTED_INPUT,
    InvalidDurationTypeError,
)
from pyduration._parser import parse_iso_duration
from pyduration._types import UNIT_NAMES, Duration, DurationInput, Unit, is_number


def _from_mapping(value: Mapping) -> Duration:
    fields = {}
    for key, field_value in value.items():
        name = key.value if isinstance(key, Unit) else key
        if name not in UNIT_NAMES:
            raise InvalidDurationTypeError(
                ERR_MSG_UNKNOWN_UNIT,
                f"unknown duration field {key!r}",
            )
        fields[name] = field_value
    return Duration(**fields)


def to_duration(value: DurationInput) -> Duration:
    """Coerce a duration input to a (not normalized) ``Duration``.

    Strings are parsed as ISO-8601, numbers are taken as milliseconds and
    mappings are merged over an all-zero duration.

    Raises:
        DurationParseError: If a string is not a valid ISO-8601 duration.
        InvalidDurationTypeError: For any other input shape.
    """
    if isinstance(value, Duration):
        return value
    if isinstance(value, str):
        return parse_iso_duration(value)
    if is_number(value):
        return Duration(milliseconds=value)
    if isinstance(value, Mapping):
        return _from_mapping(value)
    raise InvalidDurationTypeError(
        ERR_MSG_UNSUPPORTED_INPUT,
        f"cannot convert {type(value).__name__} to a duration",
    )


parse = to_duration
