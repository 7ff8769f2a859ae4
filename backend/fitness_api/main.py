"""Fitness Tracker API: FastAPI application factory.

Invariants:
    - Settings are built once and passed explicitly to the gate and the store
    - Resource routers sit behind ApiKeyMiddleware; index, health and docs do not
    - Routes registered explicitly (no auto-discovery)
    - The store engine is created on startup and disposed on shutdown
      (uvicorn turns SIGINT/SIGTERM into lifespan shutdown)

Run with: uvicorn fitness_api.main:create_app --factory
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fitness_api.api.error_handlers import register_error_handlers
from fitness_api.api.middleware import ApiKeyMiddleware, SecurityHeadersMiddleware
from fitness_api.api.routes import health, index, progress, user, workout
from fitness_api.config import Settings, get_settings
from fitness_api.core.authorization import ApiKeyGate
from fitness_api.infrastructure.database import close_db, init_db
from fitness_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

PROTECTED_PREFIXES = (
    workout.router.prefix, progress.router.prefix, user.router.prefix,
)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around one Settings instance."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_tables:
            await manager.create_tables()
        logger.info(f"Fitness Tracker API started on port {settings.port}")
        yield
        logger.info("Fitness Tracker API shutting down")
        await close_db()
        logger.info("Disconnected from database")

    app = FastAPI(
        title="Fitness Tracker API",
        version="1.0.0",
        description="A simple API for tracking workouts and progress.",
        docs_url="/api-docs",
        openapi_url="/api-docs/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Added last runs first: CORS → security headers → API key gate → routes
    app.add_middleware(
        ApiKeyMiddleware,
        gate=ApiKeyGate(settings.api_key.get_secret_value()),
        protected_prefixes=PROTECTED_PREFIXES,
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(index.router)
    app.include_router(health.router)
    app.include_router(workout.router)
    app.include_router(progress.router)
    app.include_router(user.router)

    register_error_handlers(app)
    return app
