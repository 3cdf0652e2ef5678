"""Car Shop API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"error": message}
    - The connection pool is created in the lifespan and stored on app.state
    - Interactive docs at /swagger-ui, OpenAPI document at /api-docs/openapi.json

Design Decisions:
    - Lifespan over @app.on_event: cleaner cleanup, the pool is disposed on shutdown
    - /cars/cheaper-than/{price} is registered before /cars/{id}/details
      inside the cars router so literal segments win
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from car_shop import __version__
from car_shop.api.error_handlers import register_error_handlers
from car_shop.api.routes import cars, health, sales, stats
from car_shop.config import get_settings
from car_shop.infrastructure.database import DatabaseSessionManager
from car_shop.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

DOCS_URL = "/swagger-ui"
OPENAPI_URL = "/api-docs/openapi.json"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
    )
    app.state.db_manager = db_manager
    logger.info(f"Database pool ready for {db_manager.safe_url}")
    logger.info(f"Swagger UI available at {DOCS_URL}")
    yield
    await db_manager.dispose()
    app.state.db_manager = None
    logger.info("Car Shop API shutting down")


app = FastAPI(
    title="Car Shop API",
    description="Car Shop API for Laboratory 3",
    version=__version__,
    lifespan=lifespan,
    docs_url=DOCS_URL,
    openapi_url=OPENAPI_URL,
    redoc_url=None,
    openapi_tags=[
        {"name": "Car Shop", "description": "Car Shop API for Laboratory 3"},
    ],
)

register_error_handlers(app)

# Routes, registered explicitly
app.include_router(health.router)
app.include_router(cars.router)
app.include_router(sales.router)
app.include_router(stats.router)
