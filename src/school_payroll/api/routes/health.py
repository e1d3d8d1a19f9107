"""Liveness, readiness, and database health probes."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from school_payroll import __version__
from school_payroll.api.dependencies import DbSession
from school_payroll.calculators.tables import TAX_BRACKETS

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    database: str
    tax_brackets: int
    timestamp: datetime


async def _database_status(db: DbSession) -> str:
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Database health probe failed", exc_info=True)
        return "unhealthy"
    return "healthy"


@router.get("/health", response_model=HealthResponse)
async def health_check(db: DbSession) -> HealthResponse:
    """Report service version and database reachability.

    An unreachable database degrades the status but still answers 200.
    """
    database = await _database_status(db)
    return HealthResponse(
        status="healthy" if database == "healthy" else "degraded",
        version=__version__,
        database=database,
        tax_brackets=len(TAX_BRACKETS),
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/ready")
async def readiness_check() -> dict[str, str]:
    return {"status": "ready"}


@router.get("/live")
async def liveness_check() -> dict[str, str]:
    return {"status": "alive"}
