"""Run the API with uvicorn: ``python -m school_payroll``."""

import uvicorn

from school_payroll.config import configure_logging, settings


def main() -> None:
    configure_logging()
    uvicorn.run(
        "school_payroll.api.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
