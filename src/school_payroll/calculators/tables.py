"""Salary bands, contribution rates, and the monthly withholding tax table.

All tables are built once at import and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from types import MappingProxyType

from school_payroll.calculators.types import RoleSalaryRange, TaxBracket

FALLBACK_ROLE = "Other"


def _band(role: str, minimum: str, maximum: str) -> tuple[str, RoleSalaryRange]:
    return role, RoleSalaryRange(role=role, minimum=Decimal(minimum), maximum=Decimal(maximum))


ROLE_SALARY_RANGES: Mapping[str, RoleSalaryRange] = MappingProxyType(
    dict(
        [
            _band("Registrar", "30000", "55000"),
            _band("Cashier", "18000", "25000"),
            _band("Teacher", "20000", "40000"),
            _band("HR", "35000", "60000"),
            _band("System Admin", "40000", "70000"),
            _band("Janitor", "16000", "20000"),
            _band(FALLBACK_ROLE, "18000", "30000"),
        ]
    )
)

# Employee contribution rates and monthly ceilings
SOCIAL_INSURANCE_RATE = Decimal("0.11")
SOCIAL_INSURANCE_MAX = Decimal("2000")
HEALTH_INSURANCE_RATE = Decimal("0.03")
HOUSING_FUND_RATE = Decimal("0.02")
HOUSING_FUND_MAX = Decimal("200")

THIRTEENTH_MONTH_DIVISOR = Decimal("12")

# Attendance defaults
DEFAULT_MONTHLY_WORKING_DAYS = 28
HOURS_PER_DAY = Decimal("8")
OVERTIME_MULTIPLIER = Decimal("1.25")

TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(Decimal("0"), Decimal("20833.33"), Decimal("0")),
    TaxBracket(Decimal("20833.33"), Decimal("33333.33"), Decimal("0.20")),
    TaxBracket(Decimal("33333.33"), Decimal("66666.67"), Decimal("0.25")),
    TaxBracket(Decimal("66666.67"), Decimal("166666.67"), Decimal("0.30")),
    TaxBracket(Decimal("166666.67"), Decimal("666666.67"), Decimal("0.32")),
    TaxBracket(Decimal("666666.67"), None, Decimal("0.35")),
)


def validate_salary_ranges(ranges: Mapping[str, RoleSalaryRange]) -> None:
    """Raise ValueError if the salary band table is malformed."""
    if FALLBACK_ROLE not in ranges:
        raise ValueError(f"Salary ranges must define the '{FALLBACK_ROLE}' role")
    for role, band in ranges.items():
        if band.minimum > band.maximum:
            raise ValueError(
                f"Role '{role}' has minimum {band.minimum} above maximum {band.maximum}"
            )


def validate_brackets(brackets: Sequence[TaxBracket]) -> None:
    """Raise ValueError unless brackets are contiguous from 0 to unbounded.

    Rates must be non-decreasing and only the last bracket may be open-ended.
    """
    if not brackets:
        raise ValueError("Tax bracket table is empty")
    if brackets[0].lower_bound != 0:
        raise ValueError("First tax bracket must start at 0")
    if brackets[-1].upper_bound is not None:
        raise ValueError("Last tax bracket must be unbounded")

    for previous, current in zip(brackets, brackets[1:]):
        if previous.upper_bound is None:
            raise ValueError("Only the last tax bracket may be unbounded")
        if current.lower_bound != previous.upper_bound:
            raise ValueError(
                f"Gap or overlap between brackets at {previous.upper_bound} "
                f"and {current.lower_bound}"
            )
        if current.rate < previous.rate:
            raise ValueError(
                f"Bracket rate decreases from {previous.rate} to {current.rate}"
            )
    for bracket in brackets:
        if bracket.upper_bound is not None and bracket.upper_bound <= bracket.lower_bound:
            raise ValueError(f"Empty tax bracket starting at {bracket.lower_bound}")


validate_salary_ranges(ROLE_SALARY_RANGES)
validate_brackets(TAX_BRACKETS)
