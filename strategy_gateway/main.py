"""
Main FastAPI application entry point.

Run with:
    uvicorn strategy_gateway.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from strategy_gateway.core.config import settings
from strategy_gateway.core.container import (
    get_database,
    get_event_bus,
    get_event_store,
    get_logger,
    get_strategy_projection,
)
from strategy_gateway.infrastructure.projections.strategy_projector import (
    StrategyProjector,
)
from strategy_gateway.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from strategy_gateway.presentation.routers.api.v1 import v1_router
from strategy_gateway.presentation.routers.api.v1.errors import (
    register_exception_handlers,
)
from strategy_gateway.presentation.routers.system import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup: wire the event bus (subscribes the strategy projector) and, for
    the database backend, create tables and rebuild the projection from
    the event log.
    Shutdown: dispose the database engine.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    get_event_bus()

    if settings.storage_backend == "database":
        database = get_database()
        if settings.create_tables_on_startup:
            await database.create_all()

        projector = StrategyProjector(
            projection=get_strategy_projection(), logger=logger
        )
        await projector.replay(await get_event_store().list_events())

    logger.info(
        "application_started",
        app_name=settings.app_name,
        environment=settings.environment.value,
        storage_backend=settings.storage_backend,
    )

    yield

    if settings.storage_backend == "database":
        await get_database().close()

    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Command gateway for activation strategies (event-sourced writes)",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request correlation
app.add_middleware(TraceMiddleware)

# RFC 7807 error responses
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
