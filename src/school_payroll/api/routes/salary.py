"""Salary and deduction calculator endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from school_payroll.api.schemas import (
    BaseSalaryResponse,
    BracketInfoResponse,
    BreakdownRequest,
    BreakdownResponse,
    DeductionBreakdownResponse,
    RolePayrollRequest,
    RolePayrollResponse,
    RoleSalaryRangeResponse,
    TaxBracketResponse,
)
from school_payroll.calculators import (
    RolePayrollInput,
    SalaryCalculator,
    calculate_role_payroll,
)
from school_payroll.calculators.tables import ROLE_SALARY_RANGES, TAX_BRACKETS
from school_payroll.calculators.tax_calculator import default_tax_calculator
from school_payroll.config import get_settings

router = APIRouter(prefix="/salary", tags=["salary"])


@router.get("/roles", response_model=list[RoleSalaryRangeResponse])
async def list_roles() -> list[RoleSalaryRangeResponse]:
    """Salary bands for every known role."""
    return [
        RoleSalaryRangeResponse(
            role=band.role,
            minimum=band.minimum,
            maximum=band.maximum,
            midpoint=band.midpoint,
        )
        for band in ROLE_SALARY_RANGES.values()
    ]


@router.get("/base-salary", response_model=BaseSalaryResponse)
async def get_base_salary(
    role: Annotated[str, Query()] = "",
) -> BaseSalaryResponse:
    """Base salary for a role; unknown roles use the 'Other' band."""
    base_salary = SalaryCalculator.calculate_base_salary(role)
    return BaseSalaryResponse(
        role=role,
        base_salary=base_salary,
        formatted=SalaryCalculator.format_currency(base_salary, get_settings().currency_symbol),
    )


@router.get("/tax-brackets", response_model=list[TaxBracketResponse])
async def list_tax_brackets() -> list[TaxBracketResponse]:
    """Monthly withholding tax table."""
    return [
        TaxBracketResponse(
            lower_bound=bracket.lower_bound,
            upper_bound=bracket.upper_bound,
            rate=bracket.rate,
        )
        for bracket in TAX_BRACKETS
    ]


@router.post("/breakdown", response_model=BreakdownResponse)
async def get_breakdown(payload: BreakdownRequest) -> BreakdownResponse:
    """Deductions, 13th month accrual, and net salary."""
    breakdown = SalaryCalculator.get_deduction_breakdown(payload.base_salary, payload.allowance)
    bonus = SalaryCalculator.calculate_bonus(payload.base_salary)
    net_salary = SalaryCalculator.calculate_total_salary(
        payload.base_salary, payload.allowance, bonus, breakdown.total
    )
    bracket = default_tax_calculator.describe_bracket(payload.base_salary + payload.allowance)

    return BreakdownResponse(
        base_salary=payload.base_salary,
        allowance=payload.allowance,
        bonus=bonus,
        deductions=DeductionBreakdownResponse(
            social_insurance=breakdown.social_insurance,
            health_insurance=breakdown.health_insurance,
            housing_fund=breakdown.housing_fund,
            withholding_tax=breakdown.withholding_tax,
            total=breakdown.total,
        ),
        net_salary=net_salary,
        net_salary_formatted=SalaryCalculator.format_currency(
            net_salary, get_settings().currency_symbol
        ),
        tax_bracket=BracketInfoResponse(
            label=bracket.label,
            rate=bracket.rate,
            lower_bound=bracket.lower_bound,
            upper_bound=bracket.upper_bound,
        ),
    )


@router.post("/role-payroll", response_model=RolePayrollResponse)
async def compute_role_payroll(payload: RolePayrollRequest) -> RolePayrollResponse:
    """Attendance-adjusted pay for one pay period."""
    base_salary = payload.base_salary
    if base_salary is None:
        base_salary = SalaryCalculator.calculate_base_salary(payload.role)

    result = calculate_role_payroll(
        RolePayrollInput(
            role=payload.role,
            base_salary=base_salary,
            allowance=payload.allowance,
            regular_hours=payload.regular_hours,
            overtime_hours=payload.overtime_hours,
            leave_days=payload.leave_days,
            late_minutes=payload.late_minutes,
            monthly_working_days=payload.monthly_working_days,
            pay_period_working_days=payload.pay_period_working_days,
        )
    )

    bracket = result.tax_bracket
    return RolePayrollResponse(
        role=result.role,
        adjusted_base_salary=result.adjusted_base_salary,
        hourly_rate=result.hourly_rate,
        daily_rate=result.daily_rate,
        leave_deduction=result.leave_deduction,
        late_deduction=result.late_deduction,
        overtime_pay=result.overtime_pay,
        allowance=result.allowance,
        gross_pay=result.gross_pay,
        thirteenth_month_pay=result.thirteenth_month_pay,
        social_insurance=result.social_insurance,
        health_insurance=result.health_insurance,
        housing_fund=result.housing_fund,
        taxable_income=result.taxable_income,
        withholding_tax=result.withholding_tax,
        total_deductions=result.total_deductions,
        net_pay=result.net_pay,
        tax_bracket=BracketInfoResponse(
            label=bracket.label,
            rate=bracket.rate,
            lower_bound=bracket.lower_bound,
            upper_bound=bracket.upper_bound,
        ),
    )
