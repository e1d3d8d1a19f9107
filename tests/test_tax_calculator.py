"""Unit tests for TaxCalculator and the bracket table."""

from decimal import Decimal

import pytest

from school_payroll.calculators.tables import TAX_BRACKETS, validate_brackets
from school_payroll.calculators.tax_calculator import TaxCalculator
from school_payroll.calculators.types import TaxBracket


def _brackets(*rows: tuple[str, str | None, str]) -> list[TaxBracket]:
    return [
        TaxBracket(
            lower_bound=Decimal(lower),
            upper_bound=Decimal(upper) if upper is not None else None,
            rate=Decimal(rate),
        )
        for lower, upper, rate in rows
    ]


class TestProgressiveTaxCalculation:
    """Test progressive tax bracket walk."""

    def test_single_bracket_calculation(self):
        """Single bracket applies to full income."""
        calc = TaxCalculator(_brackets(("0", None, "0.10")))

        assert calc.progressive_tax(Decimal("1000")) == Decimal("100.00")

    def test_multiple_bracket_calculation(self):
        """Multiple brackets with progressive rates."""
        calc = TaxCalculator(
            _brackets(
                ("0", "10000", "0.10"),
                ("10000", "40000", "0.12"),
                ("40000", None, "0.22"),
            )
        )

        # Within first bracket
        assert calc.progressive_tax(Decimal("5000")) == Decimal("500.00")

        # 10000 * 0.10 + 5000 * 0.12
        assert calc.progressive_tax(Decimal("15000")) == Decimal("1600.00")

        # 10000 * 0.10 + 30000 * 0.12 + 10000 * 0.22
        assert calc.progressive_tax(Decimal("50000")) == Decimal("6800.00")

    def test_added_bracket_needs_no_logic_change(self):
        """Splitting a bracket changes only the table."""
        calc = TaxCalculator(
            _brackets(
                ("0", "10000", "0.10"),
                ("10000", "20000", "0.12"),
                ("20000", "40000", "0.15"),
                ("40000", None, "0.22"),
            )
        )

        # 1000 + 1200 + 3000 + 2200
        assert calc.progressive_tax(Decimal("50000")) == Decimal("7400.00")

    def test_unsorted_table_is_ordered(self):
        calc = TaxCalculator(
            _brackets(
                ("40000", None, "0.22"),
                ("0", "10000", "0.10"),
                ("10000", "40000", "0.12"),
            )
        )
        assert calc.progressive_tax(Decimal("50000")) == Decimal("6800.00")

    @pytest.mark.parametrize("income", [Decimal("0"), Decimal("-1000")])
    def test_non_positive_income_returns_zero(self, income):
        calc = TaxCalculator()
        assert calc.progressive_tax(income) == Decimal("0")


class TestMonthlyTable:
    """Test the default monthly withholding table."""

    @pytest.mark.parametrize(
        "income,expected",
        [
            ("10000", "0"),
            ("20833.33", "0"),
            ("20833.34", "0.00"),
            ("30000", "1833.33"),
            ("33333.33", "2500.00"),
            ("50000", "6666.67"),
            ("100000", "20833.33"),
            ("1000000", "317500.00"),
        ],
    )
    def test_tax_amounts(self, income, expected):
        calc = TaxCalculator()
        assert calc.progressive_tax(Decimal(income)) == Decimal(expected)

    def test_continuous_at_every_boundary(self):
        """No jump in tax when income crosses a bracket boundary."""
        calc = TaxCalculator()
        cent = Decimal("0.01")
        for bracket in TAX_BRACKETS:
            if bracket.upper_bound is None:
                continue
            at = calc.progressive_tax(bracket.upper_bound)
            below = calc.progressive_tax(bracket.upper_bound - cent)
            above = calc.progressive_tax(bracket.upper_bound + cent)
            assert abs(at - below) <= cent
            assert abs(above - at) <= cent

    def test_default_table_is_valid(self):
        validate_brackets(TAX_BRACKETS)


class TestFindBracket:
    """Test bracket lookup and labels."""

    def test_zero_bracket_label(self):
        info = TaxCalculator().describe_bracket(Decimal("10000"))
        assert info.label == "0% (Below Threshold)"
        assert info.rate == Decimal("0")

    def test_upper_bound_is_inclusive(self):
        calc = TaxCalculator()
        assert calc.find_bracket(Decimal("20833.33")).rate == Decimal("0")
        assert calc.find_bracket(Decimal("20833.34")).rate == Decimal("0.20")

    @pytest.mark.parametrize(
        "income,label",
        [
            ("30000", "20%"),
            ("50000", "25%"),
            ("100000", "30%"),
            ("500000", "32%"),
            ("1000000", "35%"),
        ],
    )
    def test_labels(self, income, label):
        assert TaxCalculator().describe_bracket(Decimal(income)).label == label

    def test_negative_income_maps_to_first_bracket(self):
        calc = TaxCalculator()
        assert calc.find_bracket(Decimal("-5")) == TAX_BRACKETS[0]

    def test_top_bracket_is_open_ended(self):
        info = TaxCalculator().describe_bracket(Decimal("5000000"))
        assert info.upper_bound is None
        assert info.lower_bound == Decimal("666666.67")


class TestValidateBrackets:
    """Test bracket table validation."""

    def test_empty_table(self):
        with pytest.raises(ValueError, match="empty"):
            validate_brackets([])

    def test_must_start_at_zero(self):
        with pytest.raises(ValueError, match="start at 0"):
            validate_brackets(_brackets(("100", None, "0.1")))

    def test_last_must_be_unbounded(self):
        with pytest.raises(ValueError, match="unbounded"):
            validate_brackets(_brackets(("0", "100", "0.1")))

    def test_gap_rejected(self):
        with pytest.raises(ValueError, match="Gap or overlap"):
            validate_brackets(_brackets(("0", "100", "0.1"), ("150", None, "0.2")))

    def test_decreasing_rate_rejected(self):
        with pytest.raises(ValueError, match="decreases"):
            validate_brackets(_brackets(("0", "100", "0.2"), ("100", None, "0.1")))

    def test_unbounded_middle_rejected(self):
        with pytest.raises(ValueError, match="Only the last"):
            validate_brackets(
                _brackets(("0", None, "0.1"), ("100", None, "0.2"))
            )
