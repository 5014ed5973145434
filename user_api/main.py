"""User API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserApiError → status envelope
    - CORS configured from settings (not hardcoded)
    - MongoDB opened on startup via lifespan, handle kept on app.state, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app(settings) factory: tests build apps without touching the environment
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_api.api.error_handlers import register_error_handlers
from user_api.api.routes import health, users
from user_api.config import Settings, get_settings
from user_api.infrastructure.database import MongoSessionManager
from user_api.infrastructure.observability import setup_logging
from user_api.infrastructure.user_store import MongoUserStore

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings):

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        mongo = MongoSessionManager(
            settings.mongo_url,
            default_database=settings.mongo_database,
            server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
        )
        app.state.mongo = mongo
        app.state.user_store = MongoUserStore(
            mongo.collection(settings.mongo_collection),
        )
        logger.info(
            f"MongoDB connection opened (database={mongo.database.name})",
        )
        if app.docs_url:
            logger.info(f"Swagger interface loaded at {app.docs_url}")
        logger.info(
            f"User API started on http://{settings.host}:{settings.port}",
        )
        try:
            yield
        finally:
            logger.info("User API shutting down")
            await mongo.close()

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    settings = settings or get_settings()
    app = FastAPI(
        title="User API",
        version=settings.api_version,
        lifespan=_build_lifespan(settings),
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()
