"""
FastAPI application entry point.

Ties together:
- Loan application and status routes
- Database lifecycle (engine, tables)
- CORS configuration
- Domain error translation and structured logging
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solicitudes.config import configure_logging, get_settings
from solicitudes.database import create_tables, dispose_engine, get_engine, initialize_database
from solicitudes.infrastructure.common.error_handlers import register_exception_handlers
from solicitudes.infrastructure.lending.routers import estados, solicitudes

logger = structlog.get_logger(__name__)

health_router = APIRouter(tags=["health"])


@health_router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the engine and tables on startup; dispose the engine on shutdown."""
    settings = get_settings()
    initialize_database(settings)
    await create_tables(get_engine())
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        initial_status=settings.INITIAL_STATUS_NAME,
    )

    yield

    logger.info("application_stopping")
    await dispose_engine()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance ready to serve requests.
    """
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router, prefix=settings.API_V1_PREFIX)
    app.include_router(solicitudes.router, prefix=settings.API_V1_PREFIX)
    app.include_router(estados.router, prefix=settings.API_V1_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("solicitudes.main:app", host="0.0.0.0", port=8000, reload=True)  # noqa: S104
