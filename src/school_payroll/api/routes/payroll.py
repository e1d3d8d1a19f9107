"""Payroll transaction endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Path, Query, status

from school_payroll.api.dependencies import TransactionService
from school_payroll.api.schemas import (
    ApprovalRequest,
    CancelRequest,
    ErrorResponse,
    PaymentRequest,
    SummaryResponse,
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
)
from school_payroll.services import InvalidTransitionError, TransactionNotFoundError

router = APIRouter(prefix="/payroll", tags=["payroll"])


def _not_found(e: TransactionNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _conflict(e: InvalidTransitionError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


# ============================================================================
# Transaction CRUD
# ============================================================================


@router.post(
    "/transactions",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_transaction(
    service: TransactionService,
    payload: TransactionCreate,
) -> TransactionResponse:
    """Compute and record a pending payroll transaction."""
    txn = await service.create_transaction(
        employee_id=payload.employee_id,
        role=payload.role,
        school_year=payload.school_year,
        pay_period=payload.pay_period,
        processed_by=payload.processed_by,
        allowance=payload.allowance,
        base_salary=payload.base_salary,
        other_deductions=payload.other_deductions,
        notes=payload.notes,
    )
    return TransactionResponse.model_validate(txn)


@router.get("/transactions", response_model=TransactionListResponse)
async def list_transactions(
    service: TransactionService,
    employee_id: Annotated[str | None, Query()] = None,
    school_year: Annotated[str | None, Query()] = None,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
) -> TransactionListResponse:
    """List transactions, optionally filtered."""
    items = await service.list_transactions(
        employee_id=employee_id,
        school_year=school_year,
        status=status_filter,
    )
    return TransactionListResponse(
        items=[TransactionResponse.model_validate(t) for t in items],
        total=len(items),
    )


@router.get(
    "/transactions/{transaction_id}",
    response_model=TransactionResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_transaction(
    service: TransactionService,
    transaction_id: Annotated[UUID, Path()],
) -> TransactionResponse:
    try:
        txn = await service.get_transaction(transaction_id)
    except TransactionNotFoundError as e:
        raise _not_found(e)
    return TransactionResponse.model_validate(txn)


# ============================================================================
# Lifecycle
# ============================================================================


@router.post(
    "/transactions/{transaction_id}/approve",
    response_model=TransactionResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def approve_transaction(
    service: TransactionService,
    transaction_id: Annotated[UUID, Path()],
    payload: ApprovalRequest,
) -> TransactionResponse:
    try:
        txn = await service.approve(transaction_id, payload.approved_by)
    except TransactionNotFoundError as e:
        raise _not_found(e)
    except InvalidTransitionError as e:
        raise _conflict(e)
    return TransactionResponse.model_validate(txn)


@router.post(
    "/transactions/{transaction_id}/pay",
    response_model=TransactionResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def pay_transaction(
    service: TransactionService,
    transaction_id: Annotated[UUID, Path()],
    payload: PaymentRequest,
) -> TransactionResponse:
    try:
        txn = await service.mark_paid(
            transaction_id,
            payment_method=payload.payment_method,
            reference_number=payload.reference_number,
            payment_date=payload.payment_date,
        )
    except TransactionNotFoundError as e:
        raise _not_found(e)
    except InvalidTransitionError as e:
        raise _conflict(e)
    return TransactionResponse.model_validate(txn)


@router.post(
    "/transactions/{transaction_id}/cancel",
    response_model=TransactionResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def cancel_transaction(
    service: TransactionService,
    transaction_id: Annotated[UUID, Path()],
    payload: CancelRequest,
) -> TransactionResponse:
    try:
        txn = await service.cancel(transaction_id, payload.cancelled_by, payload.reason)
    except TransactionNotFoundError as e:
        raise _not_found(e)
    except InvalidTransitionError as e:
        raise _conflict(e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return TransactionResponse.model_validate(txn)


# ============================================================================
# Reporting
# ============================================================================


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(
    service: TransactionService,
    school_year: Annotated[str, Query(min_length=1)],
) -> SummaryResponse:
    """Payroll totals for a school year."""
    summary = await service.summarize(school_year)
    return SummaryResponse(
        school_year=summary.school_year,
        transaction_count=summary.transaction_count,
        total_gross=summary.total_gross,
        total_deductions=summary.total_deductions,
        total_net=summary.total_net,
        by_status=summary.by_status,
    )
