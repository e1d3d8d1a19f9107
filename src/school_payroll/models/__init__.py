"""SQLAlchemy ORM models."""

from school_payroll.models.base import Base, TimestampMixin
from school_payroll.models.payroll import PayrollTransaction

__all__ = [
    "Base",
    "PayrollTransaction",
    "TimestampMixin",
]
