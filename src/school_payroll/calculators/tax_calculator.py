"""Progressive withholding tax over an ordered bracket table."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from school_payroll.calculators.money import ZERO, round_to_cents, to_decimal
from school_payroll.calculators.tables import TAX_BRACKETS
from school_payroll.calculators.types import BracketInfo, TaxBracket


class TaxCalculator:
    """Calculates withholding tax by walking a bracket table.

    The table is data: swapping in a different sequence of contiguous
    brackets changes the result without touching the walk.
    """

    def __init__(self, brackets: Sequence[TaxBracket] = TAX_BRACKETS):
        self.brackets: tuple[TaxBracket, ...] = tuple(
            sorted(brackets, key=lambda b: b.lower_bound)
        )

    def progressive_tax(self, income: Decimal) -> Decimal:
        """Tax on income: full width of every elapsed bracket plus the excess
        over the current bracket's lower bound at its marginal rate.
        """
        income = to_decimal(income)
        if income <= 0:
            return ZERO

        total_tax = ZERO
        for bracket in self.brackets:
            if bracket.upper_bound is not None and income > bracket.upper_bound:
                total_tax += bracket.width * bracket.rate
                continue
            total_tax += (income - bracket.lower_bound) * bracket.rate
            break

        return round_to_cents(total_tax)

    def find_bracket(self, income: Decimal) -> TaxBracket:
        """Return the bracket containing income (zero and below map to the first)."""
        income = to_decimal(income)
        for bracket in self.brackets:
            if bracket.contains(income):
                return bracket
        return self.brackets[0]

    def describe_bracket(self, income: Decimal) -> BracketInfo:
        """Label and rate of the bracket containing income."""
        bracket = self.find_bracket(income)
        if bracket.rate == 0:
            label = "0% (Below Threshold)"
        else:
            label = f"{(bracket.rate * 100).normalize():f}%"
        return BracketInfo(
            label=label,
            rate=bracket.rate,
            lower_bound=bracket.lower_bound,
            upper_bound=bracket.upper_bound,
        )


default_tax_calculator = TaxCalculator()
