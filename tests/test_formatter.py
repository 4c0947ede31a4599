"""ISO-8601 duration formatting tests."""

import math

import pytest

from pyduration import normalize, parse_iso_duration, to_iso_duration
from pyduration._errors import NonFiniteDurationError


class TestFormatting:
    def test_zero(self):
        assert to_iso_duration({"milliseconds": 0}) == "PT0S"

    def test_negative_hour(self):
        assert to_iso_duration({"hours": -1}) == "-PT1H"

    def test_normalizes_first(self):
        assert to_iso_duration("PT90M") == "PT1H30M"

    def test_date_only_has_no_separator(self):
        assert to_iso_duration({"days": 14}) == "P2W"

    def test_month_and_minute(self):
        assert to_iso_duration({"months": 1, "minutes": 1}) == "P1MT1M"

    def test_every_designator(self):
        assert to_iso_duration({"days": 400}) == "P1Y1M4DT7H30M"

    def test_milliseconds_as_fractional_seconds(self):
        assert to_iso_duration({"days": 1, "milliseconds": 1500}) == "P1DT1.5S"

    def test_single_millisecond(self):
        assert to_iso_duration(1) == "PT0.001S"

    def test_negative_with_milliseconds(self):
        assert to_iso_duration(-86_399_999) == "-PT23H59M59.999S"

    def test_sub_millisecond_is_zero(self):
        assert to_iso_duration(0.4) == "PT0S"
        assert to_iso_duration(-0.4) == "PT0S"


class TestNonFinite:
    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_rejected(self, value):
        with pytest.raises(NonFiniteDurationError, match="non-finite"):
            to_iso_duration(value)


class TestRoundTrip:
    @pytest.mark.parametrize(
        "components",
        [
            {"hours": 1, "minutes": 30},
            {"years": 2, "weeks": 1, "seconds": 5, "milliseconds": 20},
            {"days": -3, "hours": -4},
            {"milliseconds": 86_399_999},
            {"months": 7},
            {"minutes": 0},
        ],
    )
    def test_parse_of_format_is_normalized(self, components):
        assert parse_iso_duration(to_iso_duration(components)) == normalize(components)


class TestOversize:
    def test_oversize_designator_is_non_finite(self):
        with pytest.raises(NonFiniteDurationError):
            to_iso_duration("P" + "9" * 400 + "Y")

    def test_huge_int(self):
        with pytest.raises(NonFiniteDurationError):
            to_iso_duration(10**400)
