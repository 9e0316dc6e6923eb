"""Tests for value scanning and display."""

import pytest
from unitconv.core.errors import ParseError
from unitconv.core.value import Value, display, parse


class TestParse:
    @pytest.mark.parametrize("given, want", [
        ("1m", Value(1.0, "m")),
        ("1 m", Value(1.0, "m")),
        ("1M", Value(1.0, "m")),
        ("-12.3km", Value(-12.3, "km")),
        ("  100c  ", Value(100.0, "c")),
        ("12.f", Value(12.0, "f")),
        ("671.67r", Value(671.67, "r")),
    ])
    def test_valid_values(self, given, want):
        assert parse(given) == want

    def test_unit_is_lower_cased(self):
        assert parse("3 KM").unit == "km"

    def test_multi_word_unit(self):
        value = parse("2 nautical mile")
        assert value.quantity == 2.0
        assert value.unit == "nautical mile"

    @pytest.mark.parametrize("given", [
        "",
        "   ",
        "m",
        "100",
        "abc 100",
        "+5m",
        ".5m",
    ])
    def test_invalid_values(self, given):
        with pytest.raises(ParseError) as exc:
            parse(given)
        assert exc.value.description == "invalid value"

    def test_lower_case_s_rejected_anywhere_in_unit(self):
        with pytest.raises(ParseError):
            parse("3 meters")
        with pytest.raises(ParseError):
            parse("3 sq")

    def test_upper_case_s_is_accepted(self):
        assert parse("3S").unit == "s"


class TestDisplay:
    def test_two_decimals(self):
        assert display(Value(212.0, "f")) == "212.00f"

    def test_negative(self):
        assert display(Value(-12.3, "km")) == "-12.30km"

    def test_rounds_for_display_only(self):
        value = Value(0.125678, "m")
        assert display(value) == "0.13m"
        assert value.quantity == 0.125678

    def test_str_uses_display(self):
        assert str(Value(1.0, "k")) == "1.00k"


class TestValue:
    def test_immutable(self):
        value = Value(1.0, "m")
        with pytest.raises(AttributeError):
            value.quantity = 2.0
