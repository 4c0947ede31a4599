"""ISO-8601 duration formatting."""

from __future__ import annotations

import math

from pyduration._conversion import to_milliseconds
from pyduration._errors import ERR_MSG_NON_FINITE, NonFiniteDurationError
from pyduration._normalize import normalize
from pyduration._types import DurationInput

_DATE_DESIGNATORS = (("years", "Y"), ("months", "M"), ("weeks", "W"), ("days", "D"))
_TIME_DESIGNATORS = (("hours", "H"), ("minutes", "M"))


def _format_seconds(seconds: int, milliseconds: int) -> str:
    if not milliseconds:
        return f"{seconds}S"
    fraction = f"{milliseconds:03d}".rstrip("0")
    return f"{seconds}.{fraction}S"


def to_iso_duration(value: DurationInput) -> str:
    """Format a duration as a normalized ISO-8601 string.

    Zero fields are omitted, milliseconds become fractional seconds and a
    negative duration gets a leading ``-``. A zero duration is ``PT0S``.

    Example:
        to_iso_duration({"days": 1, "milliseconds": 1500})  # "P1DT1.5S"
        to_iso_duration({"hours": -1})  # "-PT1H"

    Raises:
        NonFiniteDurationError: If the duration is NaN or infinite.
    """
    total = to_milliseconds(value)
    if not math.isfinite(total):
        raise NonFiniteDurationError(
            ERR_MSG_NON_FINITE,
            f"duration totals {total} milliseconds",
        )

    components = normalize(abs(total))

    date_part = "".join(
        f"{getattr(components, name)}{designator}"
        for name, designator in _DATE_DESIGNATORS
        if getattr(components, name)
    )
    time_part = "".join(
        f"{getattr(components, name)}{designator}"
        for name, designator in _TIME_DESIGNATORS
        if getattr(components, name)
    )
    if components.seconds or components.milliseconds:
        time_part += _format_seconds(components.seconds, components.milliseconds)

    if not date_part and not time_part:
        return "PT0S"

    sign = "-" if total < 0 else ""
    if time_part:
        return f"{sign}P{date_part}T{time_part}"
    return f"{sign}P{date_part}"
