"""Tests for decimal coercion, rounding, and peso formatting."""

from decimal import Decimal

import pytest

from school_payroll.calculators.money import (
    format_currency,
    format_number,
    parse_currency,
    round_to_cents,
    to_decimal,
)


class TestRounding:
    def test_round_half_up(self):
        assert round_to_cents(Decimal("10.125")) == Decimal("10.13")
        assert round_to_cents(Decimal("10.124")) == Decimal("10.12")
        assert round_to_cents(Decimal("-10.125")) == Decimal("-10.13")

    def test_to_decimal(self):
        assert to_decimal(Decimal("1.5")) == Decimal("1.5")
        assert to_decimal(3) == Decimal("3")
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(" 42.10 ") == Decimal("42.10")

    @pytest.mark.parametrize("value", [None, "", "abc", "NaN", "Infinity", float("nan"), [1]])
    def test_to_decimal_degrades_to_zero(self, value):
        assert to_decimal(value) == Decimal("0")


class TestFormatting:
    def test_format_currency(self):
        assert format_currency(Decimal("1234.5")) == "₱1,234.50"
        assert format_currency(Decimal("0")) == "₱0.00"
        assert format_currency(Decimal("1234567.891")) == "₱1,234,567.89"

    def test_format_currency_negative(self):
        assert format_currency(Decimal("-1234.5")) == "-₱1,234.50"

    def test_format_currency_custom_symbol(self):
        assert format_currency(Decimal("99"), symbol="PHP ") == "PHP 99.00"

    def test_format_number(self):
        assert format_number(Decimal("30000")) == "30,000.00"
        assert format_number(Decimal("0.005")) == "0.01"


class TestParsing:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("₱1,234.50", "1234.50"),
            ("  ₱ 24,000.00  ", "24000"),
            ("PHP 2,000", "2000"),
            ("$5.25", "5.25"),
            ("1,000,000", "1000000"),
            ("-₱1,234.50", "-1234.50"),
            ("750", "750"),
        ],
    )
    def test_parse_currency(self, text, expected):
        assert parse_currency(text) == Decimal(expected)

    @pytest.mark.parametrize("text", ["", "   ", None, "abc", "₱", "1.2.3", "12-34"])
    def test_unparseable_returns_zero(self, text):
        assert parse_currency(text) == Decimal("0")

    @pytest.mark.parametrize(
        "value",
        ["0", "0.01", "0.5", "12.34", "999.99", "1000", "20833.33", "1234567.89", "987654321.00"],
    )
    def test_format_then_parse_round_trips(self, value):
        amount = Decimal(value)
        assert parse_currency(format_currency(amount)) == amount
        assert parse_currency(format_number(amount)) == amount


class TestLargeAmounts:
    def test_round_beyond_default_precision(self):
        assert round_to_cents(Decimal("123456789012345678901234567890.125")) == Decimal(
            "123456789012345678901234567890.13"
        )

    def test_format_beyond_default_precision(self):
        assert format_number(Decimal("1E+30")) == "1,000,000,000,000,000,000,000,000,000,000.00"
