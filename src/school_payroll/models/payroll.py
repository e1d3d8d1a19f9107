"""Payroll transaction model."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, Date, DateTime, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from school_payroll.models.base import Base, TimestampMixin

MONEY = Numeric(12, 2)


class PayrollTransaction(Base, TimestampMixin):
    """One employee's pay for one pay period.

    Amounts are frozen at creation; later changes to salary bands or the
    tax table do not alter existing transactions.
    """

    __tablename__ = "payroll_transaction"

    transaction_id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    employee_id: Mapped[str] = mapped_column(String(50), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    school_year: Mapped[str] = mapped_column(String(20), nullable=False)
    pay_period: Mapped[str] = mapped_column(String(20), nullable=False)

    base_salary: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    allowance: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
    bonus: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
    gross_salary: Mapped[Decimal] = mapped_column(MONEY, nullable=False)

    # Deductions
    social_insurance: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
    health_insurance: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
    housing_fund: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
    withholding_tax: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
    other_deductions: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
    total_deductions: Mapped[Decimal] = mapped_column(MONEY, nullable=False)

    net_salary: Mapped[Decimal] = mapped_column(MONEY, nullable=False)

    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    payment_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    payment_method: Mapped[str | None] = mapped_column(String(50), nullable=True)
    reference_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    processed_by: Mapped[str] = mapped_column(String(50), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Audit trail
    approved_by: Mapped[str | None] = mapped_column(String(50), nullable=True)
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    cancelled_by: Mapped[str | None] = mapped_column(String(50), nullable=True)
    cancelled_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    cancellation_reason: Mapped[str | None] = mapped_column(String(500), nullable=True)

    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'approved', 'paid', 'cancelled')",
            name="payroll_transaction_status_check",
        ),
        Index("ix_payroll_transaction_employee", "employee_id", "school_year"),
    )
