"""Environment-driven settings and logging setup.

Values come from the process environment, with a ``.env`` file in the
working directory loaded first when present.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./school_payroll.db"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def _env_list(name: str, default: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in os.getenv(name, default).split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    database_url: str
    host: str
    port: int
    debug: bool
    log_level: str
    currency_symbol: str
    cors_origins: tuple[str, ...]

    @property
    def HOST(self) -> str:
        return self.host

    @property
    def PORT(self) -> int:
        return self.port

    @property
    def DEBUG(self) -> bool:
        return self.debug

    @classmethod
    def from_env(cls) -> Settings:
        load_dotenv()

        return cls(
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=_env_flag("DEBUG"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            currency_symbol=os.getenv("CURRENCY_SYMBOL", "₱"),
            cors_origins=_env_list("CORS_ORIGINS", "*"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the API or CLI.

    Does nothing if the root logger already has handlers.
    """
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
    )


settings = get_settings()
