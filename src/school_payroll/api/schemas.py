"""Pydantic schemas for API request/response models."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Salary schemas
# ============================================================================


class RoleSalaryRangeResponse(BaseModel):
    """Salary band for a role."""

    role: str
    minimum: Decimal
    maximum: Decimal
    midpoint: Decimal


class BaseSalaryResponse(BaseModel):
    role: str
    base_salary: Decimal
    formatted: str


class TaxBracketResponse(BaseModel):
    lower_bound: Decimal
    upper_bound: Decimal | None = None
    rate: Decimal


class BracketInfoResponse(BaseModel):
    label: str
    rate: Decimal
    lower_bound: Decimal
    upper_bound: Decimal | None = None


class DeductionBreakdownResponse(BaseModel):
    social_insurance: Decimal
    health_insurance: Decimal
    housing_fund: Decimal
    withholding_tax: Decimal
    total: Decimal


class BreakdownRequest(BaseModel):
    """Schema for a deduction breakdown request."""

    base_salary: Decimal
    allowance: Decimal = Decimal("0")


class BreakdownResponse(BaseModel):
    """Deductions, bonus, and net salary for a base salary and allowance."""

    base_salary: Decimal
    allowance: Decimal
    bonus: Decimal
    deductions: DeductionBreakdownResponse
    net_salary: Decimal
    net_salary_formatted: str
    tax_bracket: BracketInfoResponse


class RolePayrollRequest(BaseModel):
    """Schema for an attendance-adjusted pay period computation."""

    role: str
    base_salary: Decimal | None = None  # Defaults to the role's band midpoint
    allowance: Decimal = Decimal("0")
    regular_hours: Decimal | None = Field(default=None, ge=0)
    overtime_hours: Decimal | None = Field(default=None, ge=0)
    leave_days: Decimal | None = Field(default=None, ge=0)
    late_minutes: int | None = Field(default=None, ge=0)
    monthly_working_days: int | None = Field(default=None, gt=0)
    pay_period_working_days: int | None = Field(default=None, gt=0)


class RolePayrollResponse(BaseModel):
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
    tax_bracket: BracketInfoResponse


# ============================================================================
# Payroll transaction schemas
# ============================================================================


class TransactionCreate(BaseModel):
    """Schema for creating a payroll transaction."""

    employee_id: str = Field(min_length=1, max_length=50)
    role: str = Field(min_length=1, max_length=50)
    school_year: str = Field(min_length=1, max_length=20)
    pay_period: str = Field(min_length=1, max_length=20)
    processed_by: str = Field(min_length=1, max_length=50)
    allowance: Decimal = Field(default=Decimal("0"), ge=0, max_digits=12, decimal_places=2)
    base_salary: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    other_deductions: Decimal = Field(
        default=Decimal("0"), ge=0, max_digits=12, decimal_places=2
    )
    notes: str | None = None


class TransactionResponse(BaseModel):
    """Schema for payroll transaction response."""

    model_config = ConfigDict(from_attributes=True)

    transaction_id: UUID
    employee_id: str
    role: str
    school_year: str
    pay_period: str
    base_salary: Decimal
    allowance: Decimal
    bonus: Decimal
    gross_salary: Decimal
    social_insurance: Decimal
    health_insurance: Decimal
    housing_fund: Decimal
    withholding_tax: Decimal
    other_deductions: Decimal
    total_deductions: Decimal
    net_salary: Decimal
    status: str
    payment_date: date | None = None
    payment_method: str | None = None
    reference_number: str | None = None
    processed_by: str
    notes: str | None = None
    approved_by: str | None = None
    approved_at: datetime | None = None
    cancelled_by: str | None = None
    cancelled_at: datetime | None = None
    cancellation_reason: str | None = None
    created_at: datetime
    updated_at: datetime | None = None


class TransactionListResponse(BaseModel):
    items: list[TransactionResponse]
    total: int


class ApprovalRequest(BaseModel):
    approved_by: str = Field(min_length=1)


class PaymentRequest(BaseModel):
    payment_method: str = Field(min_length=1, max_length=50)
    reference_number: str | None = Field(default=None, max_length=100)
    payment_date: date | None = None


class CancelRequest(BaseModel):
    cancelled_by: str = Field(min_length=1)
    reason: str = Field(min_length=1, max_length=500)


class SummaryResponse(BaseModel):
    school_year: str
    transaction_count: int
    total_gross: Decimal
    total_deductions: Decimal
    total_net: Decimal
    by_status: dict[str, int]


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str
    code: str | None = None
