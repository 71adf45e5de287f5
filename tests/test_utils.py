"""
Tests for number parsing, rounding and formatting.
"""
import math

import pytest

from coronaanalysis.utils import format_input, format_number, parse_float, round_half_up, to_number


class TestRoundHalfUp:

    @pytest.mark.parametrize("value,expected", [
        (2.5, 2.5),
        (0.125, 0.13),
        (-0.125, -0.13),
        (39.5178, 39.52),
        (2.0491803, 2.05),
        (1.005, 1.0),     # stored as 1.00499999...
        (2.675, 2.67),    # stored as 2.67499999...
    ])
    def test_two_decimals(self, value, expected):
        assert round_half_up(value) == expected

    def test_other_precision(self):
        assert round_half_up(3.14159, 3) == 3.142

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinity_passes_through(self, value):
        assert round_half_up(value) == value

    def test_nan_passes_through(self):
        assert math.isnan(round_half_up(math.nan))

    def test_huge_value(self):
        assert round_half_up(1e300) == 1e300


class TestFormatNumber:

    @pytest.mark.parametrize("value,expected", [
        (2.5, "2.50"),
        (250, "250.00"),
        (0.125, "0.13"),
        (1e20, "100000000000000000000.00"),
        (1e21, "1e+21"),
        (-1.5e300, "-1.5e+300"),
        (1.2345e22, "1.2345e+22"),
        (math.nan, "NaN"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
    ])
    def test_display_text(self, value, expected):
        assert format_number(value) == expected


class TestFormatInput:

    @pytest.mark.parametrize("value,expected", [
        (48.0, "48"),
        (1, "1"),
        (0.025, "0.025"),
        (math.nan, "NaN"),
        (math.inf, "Infinity"),
    ])
    def test_input_text(self, value, expected):
        assert format_input(value) == expected


class TestParseFloat:
    """Leading-prefix parsing used by the material fields."""

    @pytest.mark.parametrize("raw,expected", [
        ("42", 42.0),
        ("0.03", 0.03),
        ("  3.5 dyn", 3.5),
        ("12abc", 12.0),
        (".5", 0.5),
        ("-2", -2.0),
        ("1e3x", 1000.0),
        ("1e", 1.0),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
        (7, 7.0),
    ])
    def test_parses_prefix(self, raw, expected):
        assert parse_float(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "-", ".", "e5"])
    def test_no_number_is_nan(self, raw):
        assert math.isnan(parse_float(raw))


class TestToNumber:
    """Whole-string parsing used by the line and desired dyne inputs."""

    @pytest.mark.parametrize("raw,expected", [
        ("100", 100.0),
        (" 48 ", 48.0),
        ("1e3", 1000.0),
        ("", 0.0),
        ("   ", 0.0),
        ("Infinity", math.inf),
        (2, 2.0),
    ])
    def test_parses_whole_text(self, raw, expected):
        assert to_number(raw) == expected

    @pytest.mark.parametrize("raw", ["12abc", "abc", "1.2.3", "--1"])
    def test_garbage_is_nan(self, raw):
        assert math.isnan(to_number(raw))
