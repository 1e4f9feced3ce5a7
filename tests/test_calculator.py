"""
Tests for the P/L calculator.
"""

import pytest

from tradeledger.journal import Direction, compute_result, preview_result, format_money


class TestComputeResult:
    """Tests for compute_result."""

    def test_long_trade(self):
        """Long: (exit - entry) * size - fee."""
        assert compute_result(Direction.LONG, 10, 100, 110, 2) == 98.0

    def test_short_trade(self):
        """Short: (entry - exit) * size - fee."""
        assert compute_result(Direction.SHORT, 5, 50, 40, 1) == 49.0

    def test_losing_long(self):
        assert compute_result(Direction.LONG, 2, 100, 90, 0.5) == -20.5

    def test_losing_short(self):
        assert compute_result(Direction.SHORT, 3, 40, 50) == -30.0

    def test_direction_as_string(self):
        assert compute_result("Long", 10, 100, 110, 2) == 98.0
        assert compute_result("Short", 5, 50, 40, 1) == 49.0

    def test_fee_defaults_to_zero(self):
        assert compute_result(Direction.LONG, 1, 10, 12) == 2.0

    def test_full_precision_kept(self):
        result = compute_result(Direction.LONG, 3, 1.10001, 1.10004)
        assert result == pytest.approx(0.00009)
        assert format_money(result) == "0.00"


class TestPreviewResult:
    """Tests for preview_result."""

    def test_preview_from_form_strings(self):
        assert preview_result("Long", "10", "100", "110", "2") == 98.0

    @pytest.mark.parametrize("size,entry,exit_price", [
        ("", "100", "110"),
        ("10", None, "110"),
        ("10", "100", "abc"),
        ("0", "100", "110"),
        ("10", "0", "110"),
    ])
    def test_withheld_when_inputs_incomplete(self, size, entry, exit_price):
        """Missing, unparseable or zero inputs leave the result untouched."""
        assert preview_result("Long", size, entry, exit_price, "1") is None

    def test_unparseable_fee_counts_as_zero(self):
        assert preview_result("Short", 5, 50, 40, "n/a") == 50.0

    def test_missing_fee(self):
        assert preview_result(Direction.LONG, 1, 10, 11) == 1.0

    def test_unknown_direction_priced_as_short(self):
        assert preview_result("", 1, 10, 8) == 2.0

    def test_nan_input_withheld(self):
        assert preview_result("Long", float("nan"), 100, 110) is None


class TestFormatMoney:
    """Tests for display formatting."""

    def test_two_decimals(self):
        assert format_money(98) == "98.00"
        assert format_money(2.166666) == "2.17"
        assert format_money(-12.5) == "-12.50"

    def test_format_money_rounds_instead_of_truncating(self):
        assert format_money(2.348) == "2.35"
        assert format_money(-0.019) == "-0.02"
