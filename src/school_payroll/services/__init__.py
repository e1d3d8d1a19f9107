"""Business services for school payroll."""

from school_payroll.services.payroll_service import (
    PayrollSummary,
    PayrollTransactionService,
    TransactionNotFoundError,
)
from school_payroll.services.state_machine import (
    InvalidTransitionError,
    TransactionStateMachine,
    TransactionStatus,
)

__all__ = [
    "InvalidTransitionError",
    "PayrollSummary",
    "PayrollTransactionService",
    "TransactionNotFoundError",
    "TransactionStateMachine",
    "TransactionStatus",
]
