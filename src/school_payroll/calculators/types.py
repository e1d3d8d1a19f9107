"""Type definitions for salary calculation."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RoleSalaryRange:
    """Monthly base salary band for a role."""

    role: str
    minimum: Decimal
    maximum: Decimal

    @property
    def midpoint(self) -> Decimal:
        return (self.minimum + self.maximum) / 2


@dataclass(frozen=True)
class TaxBracket:
    """Tax bracket for progressive taxation."""

    lower_bound: Decimal
    upper_bound: Decimal | None  # None = no upper limit
    rate: Decimal  # As decimal, e.g., 0.20 for 20%

    @property
    def width(self) -> Decimal | None:
        if self.upper_bound is None:
            return None
        return self.upper_bound - self.lower_bound

    def contains(self, income: Decimal) -> bool:
        """Upper bound is inclusive, lower bound exclusive."""
        if income <= self.lower_bound:
            return False
        return self.upper_bound is None or income <= self.upper_bound


@dataclass(frozen=True)
class BracketInfo:
    """Display information for the bracket an income falls in."""

    label: str
    rate: Decimal
    lower_bound: Decimal
    upper_bound: Decimal | None


@dataclass(frozen=True)
class DeductionBreakdown:
    """Itemized statutory deductions."""

    social_insurance: Decimal
    health_insurance: Decimal
    housing_fund: Decimal
    withholding_tax: Decimal
    total: Decimal

    def to_dict(self) -> dict[str, str]:
        return {
            "social_insurance": str(self.social_insurance),
            "health_insurance": str(self.health_insurance),
            "housing_fund": str(self.housing_fund),
            "withholding_tax": str(self.withholding_tax),
            "total": str(self.total),
        }


@dataclass
class RolePayrollInput:
    """Inputs for an attendance-adjusted pay period computation."""

    role: str
    base_salary: Decimal
    allowance: Decimal = Decimal("0")

    # Attendance
    regular_hours: Decimal | None = None  # Informational only; pay is salary based
    overtime_hours: Decimal | None = None
    leave_days: Decimal | None = None
    late_minutes: int | None = None
    monthly_working_days: int | None = None  # Defaults to 28
    pay_period_working_days: int | None = None  # Defaults to monthly days


@dataclass
class RolePayrollResult:
    """Result of an attendance-adjusted pay period computation."""

    role: str
    adjusted_base_salary: Decimal
    hourly_rate: Decimal
    daily_rate: Decimal
    leave_deduction: Decimal
    late_deduction: Decimal
    overtime_pay: Decimal
    allowance: Decimal
    gross_pay: Decimal
    thirteenth_month_pay: Decimal
    social_insurance: Decimal
    health_insurance: Decimal
    housing_fund: Decimal
    taxable_income: Decimal
    withholding_tax: Decimal
    total_deductions: Decimal
    net_pay: Decimal
    tax_bracket: BracketInfo
