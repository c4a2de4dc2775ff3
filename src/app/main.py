import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from src.app.api.errors import request_validation_handler
from src.app.api.v1 import donors, stats
from src.app.containers import API_MODULES, Container
from src.shared.logging import configure_logging

# Configure logging at module load time
configure_logging()

logger = logging.getLogger(__name__)

# Type alias for lifespan context manager
LifespanType = Callable[[FastAPI], AsyncIterator[None]]


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - creates the donors table on startup."""
    container: Container = app.state.container
    config = container.config()
    logger.info("Starting %s...", config.app_name)

    db = container.database()
    await db.create_schema()
    logger.info("Database initialized successfully")

    for route in ("GET    /donors", "GET    /donors/bloodtype/{type}", "POST   /donors",
                  "PUT    /donors/{id}", "DELETE /donors/{id}", "GET    /stats"):
        method, path = route.split(maxsplit=1)
        logger.info("Endpoint %-6s %s%s", method, config.api_prefix, path)

    yield

    logger.info("Shutting down %s...", config.app_name)
    await db.dispose()


def create_app(container: Container, lifespan: LifespanType | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing settings, database and services.
        lifespan: Optional lifespan context manager. If not provided, uses default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=API_MODULES)

    config = container.config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan or default_lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allow_origins,
        allow_methods=config.cors.allow_methods,
        allow_headers=config.cors.allow_headers,
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Include routers
    app.include_router(donors.router, prefix=config.api_prefix)
    app.include_router(stats.router, prefix=config.api_prefix)

    @app.get("/")
    async def root():
        return {"message": f"Welcome to {config.app_name}"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


container = Container()
app = create_app(container=container)
