"""Calculator API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CalculatorError → {"errorMessage": ...} responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Run with::

    uvicorn calculator.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from calculator.api.error_handlers import register_error_handlers
from calculator.api.routes import calculations, health, projects, results
from calculator.config import get_settings
from calculator.infrastructure.database import close_db, init_db
from calculator.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Calculator API started")
    yield
    await close_db()
    logger.info("Calculator API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Calculator API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(projects.router)
    app.include_router(calculations.router)
    app.include_router(results.router)

    register_error_handlers(app)
    return app


app = create_app()
