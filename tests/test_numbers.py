"""
Tests for numeric helpers.

Verifies:
- Half-up rounding on the binary value of floats
- Percentage clamping and rounding
- Number detection (bools, NaN, non-numbers)
- Division guards
"""
import math
import pytest

from utils.numbers import clamp, round_to, round_percentage, is_number, safe_to_divide_with


# ══════════════════════════════════════════════════════════════════════════
# Rounding
# ══════════════════════════════════════════════════════════════════════════

class TestRoundTo:

    def test_default_rounds_to_integer(self):
        assert round_to(1.4) == 1
        assert round_to(1.6) == 2

    def test_half_rounds_up(self):
        """Unlike round(), .5 never rounds to even."""
        assert round_to(0.5) == 1
        assert round_to(2.5) == 3
        assert round_to(12.5) == 13

    def test_decimals(self):
        assert round_to(1.23456, 2) == 1.23
        assert round_to(1.23556, 2) == 1.24
        assert round_to(50.25, 1) == 50.3

    def test_binary_value_decides(self):
        """1.005 is stored as 1.00499999999999989..., so it rounds down."""
        assert round_to(1.005, 2) == 1.0
        assert round_to(1.255, 2) == 1.25

    def test_negative_numbers(self):
        assert round_to(-1.26, 1) == -1.3
        assert round_to(-2.4) == -2

    def test_returns_float(self):
        assert isinstance(round_to(3), float)

    def test_non_finite_passthrough(self):
        assert round_to(math.inf, 2) == math.inf
        assert math.isnan(round_to(math.nan, 2))


class TestRoundPercentage:

    def test_within_range(self):
        assert round_percentage(50.456) == 50.46

    def test_clamped(self):
        assert round_percentage(150) == 100
        assert round_percentage(-3.5) == 0

    @pytest.mark.parametrize("value, expected", [(0, 0), (100, 100), (99.999, 100), (0.004, 0)])
    def test_edges(self, value, expected):
        assert round_percentage(value) == expected


# ══════════════════════════════════════════════════════════════════════════
# Guards
# ══════════════════════════════════════════════════════════════════════════

class TestGuards:

    def test_clamp(self):
        assert clamp(5, 0, 10) == 5
        assert clamp(-5, 0, 10) == 0
        assert clamp(15, 0, 10) == 10

    def test_is_number(self):
        assert is_number(0)
        assert is_number(3.5)
        assert is_number(-1)

    @pytest.mark.parametrize("value", [True, False, None, "1", math.nan, math.inf, -math.inf, [1]])
    def test_is_number_rejects(self, value):
        assert not is_number(value)

    def test_safe_to_divide_with(self):
        assert safe_to_divide_with(1, 2, 3)
        assert not safe_to_divide_with(1, 0)
        assert not safe_to_divide_with(None, 2)
        assert not safe_to_divide_with(math.nan)
