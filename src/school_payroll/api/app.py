"""FastAPI application factory for the school payroll service."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from school_payroll import __version__
from school_payroll.api.routes import health_router, payroll_router, salary_router
from school_payroll.config import configure_logging, get_settings
from school_payroll.database import dispose_engine, init_db

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create tables on startup and release the pool on shutdown."""
    await init_db()
    logger.info("School payroll API %s started", __version__)
    yield
    await dispose_engine()


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
    )


def create_app() -> FastAPI:
    """Build the application with salary and payroll routers mounted."""
    settings = get_settings()
    configure_logging()

    app = FastAPI(
        title="School Payroll API",
        description="Salary bands, statutory deductions, and payroll records",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health_router)
    app.include_router(salary_router, prefix=API_PREFIX)
    app.include_router(payroll_router, prefix=API_PREFIX)

    return app


# Default app instance for uvicorn
app = create_app()
