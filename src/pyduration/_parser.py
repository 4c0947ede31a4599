"""ISO-8601 duration parsing - lark grammar plus a components collector."""

from __future__ import annotations

import math

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from pyduration._errors import (
    ERR_MSG_EMPTY_DURATION,
    ERR_MSG_EMPTY_TIME_SECTION,
    ERR_MSG_INVALID_ISO_DURATION,
    ERR_MSG_MISPLACED_FRACTION,
    ERR_MSG_UNSUPPORTED_INPUT,
    DurationParseError,
    InvalidDurationTypeError,
)
from pyduration._types import Duration, Number, Unit

# Designators are case-sensitive and may appear at most once, in this order.
# "M" is months before the "T" separator and minutes after it.
ISO_DURATION_GRAMMAR = r"""
    duration: [MINUS] "P" [years] [months] [weeks] [days] [time]
    time: "T" [hours] [minutes] [seconds]

    years: NUMBER "Y"
    months: NUMBER "M"
    weeks: NUMBER "W"
    days: NUMBER "D"
    hours: NUMBER "H"
    minutes: NUMBER "M"
    seconds: NUMBER "S"

    MINUS: "-"
    NUMBER: /[0-9]+([.,][0-9]+)?/
"""

_parser = Lark(
    ISO_DURATION_GRAMMAR,
    start="duration",
    parser="lalr",
    maybe_placeholders=True,
)


class _DesignatorCollector(Transformer):
    """Flatten a parse tree into (negative, date designators, time designators).

    The time designators are None when the string has no "T" section.
    """

    def duration(self, children: list) -> tuple[bool, list, list | None]:
        minus, *date_items, time_items = children
        return minus is not None, [i for i in date_items if i is not None], time_items

    def time(self, children: list) -> list[tuple[Unit, str]]:
        return [i for i in children if i is not None]

    def __default__(self, data, children, meta) -> tuple[Unit, str]:
        return Unit(str(data)), str(children[0])


_collector = _DesignatorCollector()


def _is_fractional(number: str) -> bool:
    return "." in number or "," in number


def _to_integer(digits: str) -> Number:
    """Exact int, or infinity when the digits overflow a float."""
    as_float = float(digits)
    if math.isinf(as_float):
        return as_float
    return int(digits)


def _to_number(number: str) -> Number:
    number = number.replace(",", ".")
    if "." in number:
        return float(number)
    return _to_integer(number)


def _split_seconds(number: str) -> tuple[Number, int]:
    """Split fractional seconds into whole seconds and milliseconds.

    Digits past the millisecond are truncated.
    """
    whole, _, fraction = number.replace(",", ".").partition(".")
    return _to_integer(whole), int(fraction[:3].ljust(3, "0"))


def parse_iso_duration(text: str) -> Duration:
    """Parse an ISO-8601 duration string such as ``P1DT12H`` or ``-PT1.5S``.

    Only designators present in the string are populated; the result is not
    normalized, so ``PT90M`` gives ``Duration(minutes=90)``. A leading ``-``
    negates every field.

    Raises:
        DurationParseError: If the string does not match the grammar.
        InvalidDurationTypeError: If ``text`` is not a string.
    """
    if not isinstance(text, str):
        raise InvalidDurationTypeError(
            ERR_MSG_UNSUPPORTED_INPUT,
            f"expected an ISO-8601 string, got {type(text).__name__}",
        )

    try:
        tree = _parser.parse(text)
    except UnexpectedInput as e:
        raise DurationParseError(
            ERR_MSG_INVALID_ISO_DURATION,
            f"cannot parse duration {text!r}: {e}",
            wrapped=e,
        ) from e

    negative, date_items, time_items = _collector.transform(tree)

    if time_items is not None and not time_items:
        raise DurationParseError(
            ERR_MSG_EMPTY_TIME_SECTION,
            f"duration {text!r} has a 'T' with no hours, minutes or seconds",
        )
    items = date_items + (time_items or [])
    if not items:
        raise DurationParseError(
            ERR_MSG_EMPTY_DURATION,
            f"duration {text!r} has no designators",
        )
    for unit, number in items[:-1]:
        if _is_fractional(number):
            raise DurationParseError(
                ERR_MSG_MISPLACED_FRACTION,
                f"duration {text!r} has a fractional {unit} before the last designator",
            )

    fields: dict[str, Number] = {}
    for unit, number in items:
        if unit is Unit.SECONDS and _is_fractional(number):
            fields["seconds"], fields["milliseconds"] = _split_seconds(number)
        else:
            fields[unit.value] = _to_number(number)

    if negative:
        fields = {name: -value or 0 for name, value in fields.items()}
    return Duration(**fields)
