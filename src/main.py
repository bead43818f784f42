"""
Main FastAPI application entry point.

Builds the FastAPI application, wires the trace middleware and the RFC 9457
exception handlers, and mounts the system and /api routers.

Startup (lifespan):
    - create_tables_on_startup: create missing tables (local runs)
    - seed_sample_data: insert the sample members, items and orders

Shutdown:
    - dispose the database engine
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.infrastructure.persistence.seed import seed_sample_data
from src.presentation.routers import api_router, system_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    database = get_database()
    logger = get_logger()

    if settings.create_tables_on_startup:
        await database.create_all()
        logger.info("database_tables_created")

    if settings.seed_sample_data:
        async with database.get_session() as session:
            await seed_sample_data(session)

    logger.info("application_started", version=settings.app_version)

    yield

    await database.close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Shop orders and members API demonstrating ORM loading strategies",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(api_router)
