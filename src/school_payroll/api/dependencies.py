"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from school_payroll.database import init_engine
from school_payroll.services import PayrollTransactionService


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency; commits on success."""
    _, factory = init_engine()
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_transaction_service(db: DbSession) -> PayrollTransactionService:
    return PayrollTransactionService(db)


# Type aliases for cleaner dependency injection
TransactionService = Annotated[PayrollTransactionService, Depends(get_transaction_service)]
