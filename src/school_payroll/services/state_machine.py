"""Payroll transaction state machine with transition validation."""

from __future__ import annotations

from enum import Enum


class TransactionStatus(str, Enum):
    """Payroll transaction status values."""

    PENDING = "pending"
    APPROVED = "approved"
    PAID = "paid"
    CANCELLED = "cancelled"


def _status_value(status: str) -> str:
    return status.value if isinstance(status, TransactionStatus) else status


class InvalidTransitionError(Exception):
    """Raised when a transaction cannot move to the requested status."""

    def __init__(self, from_status: str, to_status: str, reason: str | None = None):
        self.from_status = _status_value(from_status)
        self.to_status = _status_value(to_status)
        self.reason = reason
        msg = f"Invalid transition from '{self.from_status}' to '{self.to_status}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class TransactionStateMachine:
    """Lifecycle rules for payroll transactions.

    pending -> approved | cancelled
    approved -> paid | cancelled
    paid and cancelled are final.
    """

    VALID_TRANSITIONS: dict[str, list[str]] = {
        TransactionStatus.PENDING: [TransactionStatus.APPROVED, TransactionStatus.CANCELLED],
        TransactionStatus.APPROVED: [TransactionStatus.PAID, TransactionStatus.CANCELLED],
        TransactionStatus.PAID: [],
        TransactionStatus.CANCELLED: [],
    }

    # Statuses whose amounts count toward payroll totals
    COUNTED = frozenset(
        {TransactionStatus.PENDING, TransactionStatus.APPROVED, TransactionStatus.PAID}
    )

    @classmethod
    def can_transition(cls, from_status: str, to_status: str) -> bool:
        return to_status in cls.VALID_TRANSITIONS.get(from_status, [])

    @classmethod
    def validate_transition(cls, from_status: str, to_status: str) -> None:
        """Raise InvalidTransitionError unless from_status may move to to_status."""
        if cls.can_transition(from_status, to_status):
            return
        reason = None
        if from_status in cls.VALID_TRANSITIONS and cls.is_terminal(from_status):
            reason = f"transaction is already {_status_value(from_status)}"
        raise InvalidTransitionError(from_status, to_status, reason)

    @classmethod
    def is_terminal(cls, status: str) -> bool:
        return not cls.VALID_TRANSITIONS.get(status, [])

    @classmethod
    def get_next_statuses(cls, current_status: str) -> list[str]:
        return list(cls.VALID_TRANSITIONS.get(current_status, []))
