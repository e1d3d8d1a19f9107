"""Base salary, statutory deductions, and net pay.

Every function here is total: unknown roles fall back to the "Other" band,
non-positive or non-numeric amounts produce zero deductions, and nothing
raises.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from school_payroll.calculators.money import (
    ZERO,
    format_currency,
    format_number,
    parse_currency,
    round_to_cents,
    to_decimal,
)
from school_payroll.calculators.tables import (
    FALLBACK_ROLE,
    HEALTH_INSURANCE_RATE,
    HOUSING_FUND_MAX,
    HOUSING_FUND_RATE,
    ROLE_SALARY_RANGES,
    SOCIAL_INSURANCE_MAX,
    SOCIAL_INSURANCE_RATE,
    THIRTEENTH_MONTH_DIVISOR,
)
from school_payroll.calculators.tax_calculator import default_tax_calculator
from school_payroll.calculators.types import DeductionBreakdown

logger = logging.getLogger(__name__)


def _capped(amount: Decimal, ceiling: Decimal) -> Decimal:
    return ceiling if amount > ceiling else amount


class SalaryCalculator:
    """Stateless payroll arithmetic over the module-level tables."""

    @staticmethod
    def calculate_base_salary(role: Any) -> Decimal:
        """Midpoint of the role's salary band (exact, case-sensitive match)."""
        band = ROLE_SALARY_RANGES.get(role) if isinstance(role, str) else None
        if band is None:
            logger.debug("No salary band for role %r, using %s", role, FALLBACK_ROLE)
            band = ROLE_SALARY_RANGES[FALLBACK_ROLE]
        return band.midpoint

    @staticmethod
    def calculate_bonus(base_salary: Any) -> Decimal:
        """13th month pay accrual: base salary / 12."""
        base_salary = to_decimal(base_salary)
        if base_salary <= 0:
            return ZERO
        return round_to_cents(base_salary / THIRTEENTH_MONTH_DIVISOR)

    @staticmethod
    def calculate_social_insurance(base_salary: Any) -> Decimal:
        base_salary = to_decimal(base_salary)
        if base_salary <= 0:
            return ZERO
        return _capped(round_to_cents(base_salary * SOCIAL_INSURANCE_RATE), SOCIAL_INSURANCE_MAX)

    @staticmethod
    def calculate_health_insurance(base_salary: Any) -> Decimal:
        base_salary = to_decimal(base_salary)
        if base_salary <= 0:
            return ZERO
        return round_to_cents(base_salary * HEALTH_INSURANCE_RATE)

    @staticmethod
    def calculate_housing_fund(base_salary: Any) -> Decimal:
        base_salary = to_decimal(base_salary)
        if base_salary <= 0:
            return ZERO
        return _capped(round_to_cents(base_salary * HOUSING_FUND_RATE), HOUSING_FUND_MAX)

    @staticmethod
    def calculate_withholding_tax(base_salary: Any, allowance: Any) -> Decimal:
        """Progressive tax on base salary plus taxable allowance.

        No tax is withheld when there is no positive base salary.
        """
        base_salary = to_decimal(base_salary)
        if base_salary <= 0:
            return ZERO
        return default_tax_calculator.progressive_tax(base_salary + to_decimal(allowance))

    @staticmethod
    def calculate_total_deductions(base_salary: Any, allowance: Any) -> Decimal:
        return round_to_cents(
            SalaryCalculator.calculate_social_insurance(base_salary)
            + SalaryCalculator.calculate_health_insurance(base_salary)
            + SalaryCalculator.calculate_housing_fund(base_salary)
            + SalaryCalculator.calculate_withholding_tax(base_salary, allowance)
        )

    @staticmethod
    def get_deduction_breakdown(base_salary: Any, allowance: Any) -> DeductionBreakdown:
        return DeductionBreakdown(
            social_insurance=SalaryCalculator.calculate_social_insurance(base_salary),
            health_insurance=SalaryCalculator.calculate_health_insurance(base_salary),
            housing_fund=SalaryCalculator.calculate_housing_fund(base_salary),
            withholding_tax=SalaryCalculator.calculate_withholding_tax(base_salary, allowance),
            total=SalaryCalculator.calculate_total_deductions(base_salary, allowance),
        )

    @staticmethod
    def calculate_total_salary(
        base_salary: Any, allowance: Any, bonus: Any, deductions: Any
    ) -> Decimal:
        """Net salary: base + allowance + bonus - deductions.

        Not floored at zero; an oversized deductions figure yields a negative
        result.
        """
        return round_to_cents(
            to_decimal(base_salary)
            + to_decimal(allowance)
            + to_decimal(bonus)
            - to_decimal(deductions)
        )

    format_currency = staticmethod(format_currency)
    format_number = staticmethod(format_number)
    parse_currency = staticmethod(parse_currency)
