"""
Main FastAPI application entry point.

Uses Application Factory Pattern.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from augure import __version__
from augure.config.settings import Settings, get_settings
from augure.di import get_container, initialize_container, shutdown_container
from augure.domain.exceptions import AugureException
from augure.infrastructure.monitoring import get_logger, setup_logging
from augure.presentation.api.middleware import (
    MetricsMiddleware,
    RequestIDMiddleware,
    augure_exception_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from augure.presentation.api.routes import analysis, auth, health, users, wallets


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    # Structured logging (JSON only in production)
    json_logs = settings.ENV == "production"
    setup_logging(
        level=settings.LOG_LEVEL, json_logs=json_logs, service=settings.APP_NAME
    )
    logger = get_logger(__name__)

    logger.info(f"Creating {settings.APP_NAME} application (ENV={settings.ENV})")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Starting {settings.APP_NAME} application...")
        await initialize_container()
        logger.info(f"{settings.APP_NAME} application started successfully")

        yield

        logger.info(f"Shutting down {settings.APP_NAME} application...")
        await shutdown_container()
        logger.info(f"{settings.APP_NAME} application shutdown complete")

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="AI-assisted crypto wallet profit/loss analysis",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware chain; the last one added runs first
    # 1. Request ID middleware (outermost for tracking)
    app.add_middleware(RequestIDMiddleware)

    # 2. Metrics middleware
    if settings.METRICS_ENABLED:
        app.add_middleware(MetricsMiddleware)

    # 3. GZip compression middleware
    app.add_middleware(
        GZipMiddleware,
        minimum_size=1000,
        compresslevel=6,
    )

    # 4. CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(AugureException, augure_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register routes
    app.include_router(health.router, prefix="/api")
    app.include_router(auth.router, prefix="/api")
    app.include_router(users.router, prefix="/api")
    app.include_router(wallets.router, prefix="/api")
    app.include_router(analysis.router, prefix="/api")

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint."""
        return {
            "service": settings.APP_NAME,
            "status": "running",
            "version": __version__,
            "description": "AI-assisted crypto wallet analysis",
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Service health with database connectivity."""
        db_healthy = await get_container().database.health_check()

        return {
            "status": "healthy" if db_healthy else "degraded",
            "version": __version__,
            "components": {
                "database": {"status": "healthy" if db_healthy else "unhealthy"},
            },
        }

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """
            Prometheus metrics endpoint.

            Returns metrics in Prometheus text format for scraping.
            """
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    logger.info(f"{settings.APP_NAME} application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Get or create application instance (lazy initialization).

    For uvicorn: uvicorn augure.main:get_app --factory
    """
    return create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "augure.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
    )


if __name__ == "__main__":
    main()
