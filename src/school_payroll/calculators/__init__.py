"""Salary, deduction, and withholding tax calculators."""

from school_payroll.calculators.role_payroll import RolePayrollCalculator, calculate_role_payroll
from school_payroll.calculators.salary import SalaryCalculator
from school_payroll.calculators.tax_calculator import TaxCalculator
from school_payroll.calculators.types import (
    BracketInfo,
    DeductionBreakdown,
    RolePayrollInput,
    RolePayrollResult,
    RoleSalaryRange,
    TaxBracket,
)

__all__ = [
    "BracketInfo",
    "DeductionBreakdown",
    "RolePayrollCalculator",
    "RolePayrollInput",
    "RolePayrollResult",
    "RoleSalaryRange",
    "SalaryCalculator",
    "TaxBracket",
    "TaxCalculator",
    "calculate_role_payroll",
]
