"""Payroll transaction creation, lifecycle, and reporting."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from school_payroll.calculators.money import ZERO, round_to_cents, to_decimal
from school_payroll.calculators.salary import SalaryCalculator
from school_payroll.models import PayrollTransaction
from school_payroll.services.state_machine import (
    TransactionStateMachine,
    TransactionStatus,
)

logger = logging.getLogger(__name__)


class TransactionNotFoundError(Exception):
    """Raised when a payroll transaction does not exist."""

    def __init__(self, transaction_id: UUID):
        self.transaction_id = transaction_id
        super().__init__(f"Payroll transaction {transaction_id} not found")


@dataclass(frozen=True)
class PayrollSummary:
    """Totals across counted transactions for a school year."""

    school_year: str
    transaction_count: int
    total_gross: Decimal
    total_deductions: Decimal
    total_net: Decimal
    by_status: dict[str, int]


class PayrollTransactionService:
    """Records payroll transactions computed by SalaryCalculator."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_transaction(
        self,
        employee_id: str,
        role: str,
        school_year: str,
        pay_period: str,
        processed_by: str,
        allowance: Any = ZERO,
        base_salary: Any | None = None,
        other_deductions: Any = ZERO,
        notes: str | None = None,
    ) -> PayrollTransaction:
        """Compute and store a pending transaction.

        Base salary defaults to the midpoint of the role's band.
        """
        if base_salary is None:
            base = SalaryCalculator.calculate_base_salary(role)
        else:
            base = round_to_cents(to_decimal(base_salary))
        allowance = round_to_cents(to_decimal(allowance))
        other = round_to_cents(max(to_decimal(other_deductions), ZERO))

        breakdown = SalaryCalculator.get_deduction_breakdown(base, allowance)
        bonus = SalaryCalculator.calculate_bonus(base)
        total_deductions = round_to_cents(breakdown.total + other)

        txn = PayrollTransaction(
            employee_id=employee_id,
            role=role,
            school_year=school_year,
            pay_period=pay_period,
            base_salary=base,
            allowance=allowance,
            bonus=bonus,
            gross_salary=round_to_cents(base + allowance),
            social_insurance=breakdown.social_insurance,
            health_insurance=breakdown.health_insurance,
            housing_fund=breakdown.housing_fund,
            withholding_tax=breakdown.withholding_tax,
            other_deductions=other,
            total_deductions=total_deductions,
            net_salary=SalaryCalculator.calculate_total_salary(
                base, allowance, bonus, total_deductions
            ),
            status=TransactionStatus.PENDING.value,
            processed_by=processed_by,
            notes=notes,
        )
        self.session.add(txn)
        await self.session.flush()

        if txn.net_salary < 0:
            logger.warning(
                "Transaction %s for employee %s has negative net salary %s",
                txn.transaction_id,
                employee_id,
                txn.net_salary,
            )
        logger.info(
            "Created payroll transaction %s for employee %s (%s %s)",
            txn.transaction_id,
            employee_id,
            school_year,
            pay_period,
        )
        return txn

    async def get_transaction(self, transaction_id: UUID) -> PayrollTransaction:
        txn = await self.session.get(PayrollTransaction, transaction_id)
        if txn is None:
            raise TransactionNotFoundError(transaction_id)
        return txn

    async def list_transactions(
        self,
        employee_id: str | None = None,
        school_year: str | None = None,
        status: str | None = None,
    ) -> list[PayrollTransaction]:
        stmt = select(PayrollTransaction)
        if employee_id is not None:
            stmt = stmt.where(PayrollTransaction.employee_id == employee_id)
        if school_year is not None:
            stmt = stmt.where(PayrollTransaction.school_year == school_year)
        if status is not None:
            stmt = stmt.where(PayrollTransaction.status == status)
        stmt = stmt.order_by(PayrollTransaction.created_at, PayrollTransaction.pay_period)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def approve(self, transaction_id: UUID, approved_by: str) -> PayrollTransaction:
        txn = await self.get_transaction(transaction_id)
        TransactionStateMachine.validate_transition(txn.status, TransactionStatus.APPROVED)

        txn.status = TransactionStatus.APPROVED.value
        txn.approved_by = approved_by
        txn.approved_at = datetime.now(timezone.utc)
        await self.session.flush()

        logger.info("Approved payroll transaction %s by %s", transaction_id, approved_by)
        return txn

    async def mark_paid(
        self,
        transaction_id: UUID,
        payment_method: str,
        reference_number: str | None = None,
        payment_date: date | None = None,
    ) -> PayrollTransaction:
        txn = await self.get_transaction(transaction_id)
        TransactionStateMachine.validate_transition(txn.status, TransactionStatus.PAID)

        txn.status = TransactionStatus.PAID.value
        txn.payment_method = payment_method
        txn.reference_number = reference_number
        txn.payment_date = payment_date or date.today()
        await self.session.flush()

        logger.info("Marked payroll transaction %s paid via %s", transaction_id, payment_method)
        return txn

    async def cancel(
        self, transaction_id: UUID, cancelled_by: str, reason: str
    ) -> PayrollTransaction:
        if not reason or not reason.strip():
            raise ValueError("Cancellation reason is required")

        txn = await self.get_transaction(transaction_id)
        TransactionStateMachine.validate_transition(txn.status, TransactionStatus.CANCELLED)

        txn.status = TransactionStatus.CANCELLED.value
        txn.cancelled_by = cancelled_by
        txn.cancelled_at = datetime.now(timezone.utc)
        txn.cancellation_reason = reason.strip()
        await self.session.flush()

        logger.info("Cancelled payroll transaction %s: %s", transaction_id, txn.cancellation_reason)
        return txn

    async def summarize(self, school_year: str) -> PayrollSummary:
        """Totals for a school year; cancelled transactions are excluded from sums."""
        counted = [status.value for status in TransactionStateMachine.COUNTED]

        totals = await self.session.execute(
            select(
                func.count(PayrollTransaction.transaction_id),
                func.coalesce(func.sum(PayrollTransaction.gross_salary), 0),
                func.coalesce(func.sum(PayrollTransaction.total_deductions), 0),
                func.coalesce(func.sum(PayrollTransaction.net_salary), 0),
            ).where(
                PayrollTransaction.school_year == school_year,
                PayrollTransaction.status.in_(counted),
            )
        )
        count, gross, deductions, net = totals.one()

        status_rows = await self.session.execute(
            select(PayrollTransaction.status, func.count())
            .where(PayrollTransaction.school_year == school_year)
            .group_by(PayrollTransaction.status)
        )

        return PayrollSummary(
            school_year=school_year,
            transaction_count=int(count),
            total_gross=round_to_cents(to_decimal(gross)),
            total_deductions=round_to_cents(to_decimal(deductions)),
            total_net=round_to_cents(to_decimal(net)),
            by_status={status: int(n) for status, n in status_rows.all()},
        )
