"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.dependencies import get_pool
from src.api.errors import request_validation_error_handler
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

tags_metadata = [
    {
        "name": "v1",
        "description": "Account Registration API v1 - Create user accounts",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Opens the database connection pool and runs migrations
    - Closes the pool when the app stops
    """
    settings = get_settings()
    logger.info(
        "Opening connection pool (min=%d, max=%d)",
        settings.pool_min_size,
        settings.pool_max_size,
    )

    with ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    ) as pool:
        run_migrations(pool)
        app.state.pool = pool
        logger.info("Application startup complete")
        yield
        logger.info("Closing connection pool")


app = FastAPI(
    title="contacts-api",
    description="Account Registration API - Validated, uniqueness-checked user sign-up",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
def health_check(pool: ConnectionPool = Depends(get_pool)) -> dict[str, str]:
    """Report healthy once the database answers SELECT 1."""
    with pool.connection() as conn:
        conn.execute("SELECT 1")
    return {"status": "healthy"}
