"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from shared.config import get_settings
from shared.database import MongoDatabase
from shared.observability import setup_logging
from .dependencies import ServiceContainer, set_container, reset_container
from .error_handlers import register_error_handlers
from .routes import health
from modules.auth.routes import router as auth_router
from modules.users.routes import router as users_router
from modules.surveys.routes import router as surveys_router
from modules.reports.routes import router as reports_router
from modules.payments.routes import router as payments_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Opens the shared MongoDB handle at startup and closes it at shutdown.
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    database = MongoDatabase(
        settings.mongodb_uri,
        settings.mongodb_database,
        timeout_ms=settings.mongodb_timeout_ms,
    )
    container = ServiceContainer(database=database, settings=settings)
    set_container(container)

    try:
        container.ensure_indexes()
    except PyMongoError:
        logger.error("Could not ensure MongoDB indexes at startup", exc_info=True)

    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    logger.info(f"Shutting down {settings.app_name}")
    database.close()
    reset_container()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Survey and voting backend",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix=API_PREFIX, tags=["auth"])
    app.include_router(users_router, prefix=f"{API_PREFIX}/users", tags=["users"])
    app.include_router(surveys_router, prefix=f"{API_PREFIX}/surveys", tags=["surveys"])
    app.include_router(reports_router, prefix=f"{API_PREFIX}/reports", tags=["reports"])
    app.include_router(payments_router, prefix=f"{API_PREFIX}/payments", tags=["payments"])

    return app


# Application instance for uvicorn
app = create_app()
