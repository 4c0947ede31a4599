"""Duration input coercion tests."""

import pytest

from pyduration import Duration, Unit, parse, to_duration
from pyduration._errors import DurationParseError, InvalidDurationTypeError


class TestShapes:
    def test_string(self):
        assert to_duration("PT1H") == Duration(hours=1)

    def test_int_is_milliseconds(self):
        assert to_duration(1500) == Duration(milliseconds=1500)

    def test_float_is_milliseconds(self):
        assert to_duration(0.5) == Duration(milliseconds=0.5)

    def test_mapping_merged_over_zero(self):
        assert to_duration({"days": 2, "seconds": 3}) == Duration(days=2, seconds=3)

    def test_empty_mapping(self):
        assert to_duration({}) == Duration()

    def test_unit_keys(self):
        assert to_duration({Unit.HOURS: 4}) == Duration(hours=4)

    def test_duration_passes_through(self, day_and_a_half):
        assert to_duration(day_and_a_half) is day_and_a_half

    def test_mapping_not_normalized(self):
        assert to_duration({"minutes": 90}) == Duration(minutes=90)

    def test_parse_is_the_same_funnel(self):
        assert parse is to_duration


class TestRejectedShapes:
    @pytest.mark.parametrize("value", [None, True, [1, 2], (1,), object(), b"PT1H"])
    def test_unsupported_type(self, value):
        with pytest.raises(InvalidDurationTypeError, match="unsupported duration input"):
            to_duration(value)

    def test_unknown_field(self):
        with pytest.raises(InvalidDurationTypeError, match="unknown duration unit"):
            to_duration({"fortnights": 1})

    def test_non_numeric_field(self):
        with pytest.raises(InvalidDurationTypeError, match="must be a number"):
            to_duration({"days": "1"})

    def test_bool_field(self):
        with pytest.raises(InvalidDurationTypeError):
            to_duration({"days": True})

    def test_is_type_error(self):
        with pytest.raises(TypeError):
            to_duration(None)

    def test_bad_string_propagates_parse_error(self):
        with pytest.raises(DurationParseError):
            to_duration("1 hour")


class TestDurationFieldValidation:
    @pytest.mark.parametrize("value", ["1", None, True, [1]])
    def test_bad_field_rejected(self, value):
        with pytest.raises(InvalidDurationTypeError, match="must be a number"):
            Duration(seconds=value)

    def test_internal_names_the_field(self):
        with pytest.raises(InvalidDurationTypeError) as exc_info:
            Duration(hours="2")
        assert "'hours'" in exc_info.value.internal()

    def test_valid_fields_accepted(self):
        assert Duration(days=1.5, seconds=-3).days == 1.5
