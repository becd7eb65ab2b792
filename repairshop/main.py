"""Repair Shop API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RepairShopError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema creation on startup is opt-in (database_create_schema); Alembic owns
      the schema everywhere else
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from repairshop.api.error_handlers import register_error_handlers
from repairshop.api.routes import devices, health, repairs, users
from repairshop.config import get_settings
from repairshop.infrastructure.database import init_db
from repairshop.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await manager.create_schema()
    logger.info("Repair Shop API started")
    yield
    logger.info("Repair Shop API shutting down")
    await manager.close()


app = FastAPI(
    title="Repair Shop API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(users.router)
app.include_router(devices.router)
app.include_router(repairs.router)

register_error_handlers(app)
