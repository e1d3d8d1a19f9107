"""Attendance-adjusted pay period computation for a role."""

from __future__ import annotations

from decimal import Decimal

from school_payroll.calculators.money import ZERO, round_to_cents, to_decimal
from school_payroll.calculators.salary import SalaryCalculator
from school_payroll.calculators.tables import (
    DEFAULT_MONTHLY_WORKING_DAYS,
    HOURS_PER_DAY,
    OVERTIME_MULTIPLIER,
)
from school_payroll.calculators.tax_calculator import TaxCalculator, default_tax_calculator
from school_payroll.calculators.types import RolePayrollInput, RolePayrollResult


class RolePayrollCalculator:
    """Computes one pay period from a monthly salary and attendance.

    Steps:
    1. Prorate salary and allowance when the pay period is shorter than the
       month (e.g. 15 of 28 days for a semi-monthly run).
    2. Derive hourly and daily rates from the full monthly salary.
    3. Deduct unpaid leave (daily rate) and lateness (hourly rate), add
       overtime at 125% of the hourly rate.
    4. Contributions are taken on gross pay; withholding tax on gross less
       contributions.
    """

    def __init__(self, tax_calculator: TaxCalculator | None = None):
        self.tax_calculator = tax_calculator or default_tax_calculator

    def calculate(self, inputs: RolePayrollInput) -> RolePayrollResult:
        base_salary = to_decimal(inputs.base_salary)
        allowance = to_decimal(inputs.allowance)

        monthly_days = inputs.monthly_working_days
        if monthly_days is None:
            monthly_days = DEFAULT_MONTHLY_WORKING_DAYS
        period_days = inputs.pay_period_working_days
        if period_days is None:
            period_days = monthly_days

        period_salary = base_salary
        period_allowance = allowance
        if 0 < period_days < monthly_days:
            fraction = Decimal(period_days) / Decimal(monthly_days)
            period_salary = round_to_cents(fraction * base_salary)
            period_allowance = round_to_cents(fraction * allowance)

        if monthly_days > 0:
            hourly_rate = round_to_cents(base_salary / (monthly_days * HOURS_PER_DAY))
            daily_rate = round_to_cents(base_salary / monthly_days)
        else:
            hourly_rate = ZERO
            daily_rate = ZERO

        leave_days = to_decimal(inputs.leave_days)
        leave_deduction = ZERO
        if leave_days > 0 and daily_rate > 0:
            leave_deduction = round_to_cents(daily_rate * leave_days)

        late_minutes = to_decimal(inputs.late_minutes)
        late_deduction = ZERO
        if late_minutes > 0 and hourly_rate > 0:
            late_deduction = round_to_cents(hourly_rate * (late_minutes / Decimal(60)))

        overtime_hours = to_decimal(inputs.overtime_hours)
        overtime_pay = ZERO
        if overtime_hours > 0 and hourly_rate > 0:
            overtime_pay = round_to_cents(hourly_rate * OVERTIME_MULTIPLIER * overtime_hours)

        gross_pay = period_salary - leave_deduction - late_deduction + overtime_pay + period_allowance
        gross_pay = max(gross_pay, ZERO)

        social_insurance = SalaryCalculator.calculate_social_insurance(gross_pay)
        health_insurance = SalaryCalculator.calculate_health_insurance(gross_pay)
        housing_fund = SalaryCalculator.calculate_housing_fund(gross_pay)
        contributions = social_insurance + health_insurance + housing_fund

        taxable_income = max(gross_pay - contributions, ZERO)
        withholding_tax = self.tax_calculator.progressive_tax(taxable_income)

        total_deductions = contributions + withholding_tax
        net_pay = max(gross_pay - total_deductions, ZERO)

        return RolePayrollResult(
            role=inputs.role,
            adjusted_base_salary=period_salary,
            hourly_rate=hourly_rate,
            daily_rate=daily_rate,
            leave_deduction=leave_deduction,
            late_deduction=late_deduction,
            overtime_pay=overtime_pay,
            allowance=period_allowance,
            gross_pay=gross_pay,
            thirteenth_month_pay=SalaryCalculator.calculate_bonus(gross_pay),
            social_insurance=social_insurance,
            health_insurance=health_insurance,
            housing_fund=housing_fund,
            taxable_income=taxable_income,
            withholding_tax=withholding_tax,
            total_deductions=total_deductions,
            net_pay=net_pay,
            tax_bracket=self.tax_calculator.describe_bracket(taxable_income),
        )


def calculate_role_payroll(inputs: RolePayrollInput) -> RolePayrollResult:
    """Compute a pay period with the default tax table."""
    return RolePayrollCalculator().calculate(inputs)
