"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./solicitudes.db"
    DATABASE_POOL_SIZE: int = 20
    DATABASE_MAX_OVERFLOW: int = 30

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "CrediYa Solicitudes API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Lending
    INITIAL_STATUS_NAME: str = "PENDIENTE"

    @field_validator("INITIAL_STATUS_NAME", mode="after")
    @classmethod
    def strip_initial_status_name(cls, value: str) -> str:
        """Strip whitespace and reject a blank initial status name."""
        value = value.strip()
        if not value:
            msg = "INITIAL_STATUS_NAME cannot be empty"
            raise ValueError(msg)
        return value

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


def configure_logging(environment: str = "development", level: str | None = None) -> None:
    """
    Route stdlib logging through structlog.

    Production renders JSON lines; other environments use the console renderer.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level or ("DEBUG" if environment == "development" else "INFO"),
    )
    # aiosqlite logs every statement it forwards at DEBUG
    logging.getLogger("aiosqlite").setLevel(logging.INFO)

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
