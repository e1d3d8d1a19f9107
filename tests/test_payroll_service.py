"""Tests for PayrollTransactionService against an in-memory database."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from school_payroll.services import (
    InvalidTransitionError,
    PayrollTransactionService,
    TransactionNotFoundError,
)


async def _create(service: PayrollTransactionService, **overrides):
    fields = {
        "employee_id": "EMP001",
        "role": "Teacher",
        "school_year": "2025-2026",
        "pay_period": "2025-06",
        "processed_by": "hr-admin",
    }
    fields.update(overrides)
    return await service.create_transaction(**fields)


class TestCreateTransaction:
    """Test transaction computation and persistence."""

    async def test_defaults_base_salary_from_role(self, service):
        txn = await _create(service)

        assert txn.transaction_id is not None
        assert txn.status == "pending"
        assert txn.base_salary == Decimal("30000")
        assert txn.bonus == Decimal("2500.00")
        assert txn.gross_salary == Decimal("30000.00")
        assert txn.social_insurance == Decimal("2000")
        assert txn.health_insurance == Decimal("900.00")
        assert txn.housing_fund == Decimal("200")
        assert txn.withholding_tax == Decimal("1833.33")
        assert txn.total_deductions == Decimal("4933.33")
        assert txn.net_salary == Decimal("27566.67")
        assert txn.created_at is not None

    async def test_unknown_role_uses_other_band(self, service):
        txn = await _create(service, role="Librarian")
        assert txn.base_salary == Decimal("24000")

    async def test_explicit_base_salary_and_other_deductions(self, service):
        txn = await _create(
            service,
            base_salary=Decimal("18000"),
            allowance=Decimal("1000"),
            other_deductions=Decimal("500"),
        )

        # 1980 + 540 + 200 + 0 tax (19000 is below threshold) + 500 other
        assert txn.total_deductions == Decimal("3220.00")
        assert txn.gross_salary == Decimal("19000.00")
        # 18000 + 1000 + 1500 - 3220
        assert txn.net_salary == Decimal("17280.00")

    async def test_get_missing_transaction(self, service):
        missing = uuid4()
        with pytest.raises(TransactionNotFoundError) as exc_info:
            await service.get_transaction(missing)
        assert exc_info.value.transaction_id == missing


class TestLifecycle:
    """Test approve, pay, and cancel."""

    async def test_approve_then_pay(self, service):
        txn = await _create(service)

        approved = await service.approve(txn.transaction_id, "principal")
        assert approved.status == "approved"
        assert approved.approved_by == "principal"
        assert approved.approved_at is not None

        paid = await service.mark_paid(
            txn.transaction_id,
            payment_method="bank_transfer",
            reference_number="REF-001",
            payment_date=date(2025, 6, 30),
        )
        assert paid.status == "paid"
        assert paid.payment_method == "bank_transfer"
        assert paid.reference_number == "REF-001"
        assert paid.payment_date == date(2025, 6, 30)

    async def test_payment_date_defaults_to_today(self, service):
        txn = await _create(service)
        await service.approve(txn.transaction_id, "principal")

        paid = await service.mark_paid(txn.transaction_id, payment_method="cash")
        assert paid.payment_date == date.today()

    async def test_cannot_pay_pending(self, service):
        txn = await _create(service)
        with pytest.raises(InvalidTransitionError):
            await service.mark_paid(txn.transaction_id, payment_method="cash")

    async def test_cannot_approve_twice(self, service):
        txn = await _create(service)
        await service.approve(txn.transaction_id, "principal")
        with pytest.raises(InvalidTransitionError):
            await service.approve(txn.transaction_id, "principal")

    async def test_cancel_requires_reason(self, service):
        txn = await _create(service)
        with pytest.raises(ValueError):
            await service.cancel(txn.transaction_id, "hr-admin", "   ")

    async def test_cancel_pending(self, service):
        txn = await _create(service)
        cancelled = await service.cancel(txn.transaction_id, "hr-admin", " duplicate entry ")

        assert cancelled.status == "cancelled"
        assert cancelled.cancelled_by == "hr-admin"
        assert cancelled.cancellation_reason == "duplicate entry"
        assert cancelled.cancelled_at is not None

    async def test_cannot_cancel_paid(self, service):
        txn = await _create(service)
        await service.approve(txn.transaction_id, "principal")
        await service.mark_paid(txn.transaction_id, payment_method="cash")

        with pytest.raises(InvalidTransitionError):
            await service.cancel(txn.transaction_id, "hr-admin", "too late")


class TestQueries:
    """Test listing and summaries."""

    async def test_list_filters(self, service):
        await _create(service, employee_id="EMP001", pay_period="2025-06")
        await _create(service, employee_id="EMP001", pay_period="2025-07")
        other = await _create(service, employee_id="EMP002", role="Janitor")
        await service.approve(other.transaction_id, "principal")

        assert len(await service.list_transactions()) == 3
        assert len(await service.list_transactions(employee_id="EMP001")) == 2
        approved = await service.list_transactions(status="approved")
        assert [t.employee_id for t in approved] == ["EMP002"]
        assert await service.list_transactions(school_year="2024-2025") == []

    async def test_summary_excludes_cancelled(self, service):
        await _create(service, employee_id="EMP001")
        await _create(service, employee_id="EMP002")
        janitor = await _create(service, employee_id="EMP003", role="Janitor")
        await service.cancel(janitor.transaction_id, "hr-admin", "left school")

        summary = await service.summarize("2025-2026")

        assert summary.transaction_count == 2
        assert summary.total_gross == Decimal("60000.00")
        assert summary.total_deductions == Decimal("9866.66")
        assert summary.total_net == Decimal("55133.34")
        assert summary.by_status == {"pending": 2, "cancelled": 1}

    async def test_summary_empty_year(self, service):
        summary = await service.summarize("1999-2000")

        assert summary.transaction_count == 0
        assert summary.total_net == Decimal("0")
        assert summary.by_status == {}
