"""
Main FastAPI application entry point.

Uses Application Factory Pattern.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from vigie import __version__
from vigie.config.settings import Settings, get_settings
from vigie.di.container import (
    DIContainer,
    initialize_container,
    override_container,
    shutdown_container,
)
from vigie.domain.exceptions import VigieException
from vigie.infrastructure.monitoring import get_logger, setup_logging
from vigie.presentation.api.middleware import (
    MetricsMiddleware,
    vigie_exception_handler,
)
from vigie.presentation.api.routes import dashboard, health, networks, wallet


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)
        container: Optional prebuilt DI container (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = container.settings if container is not None else get_settings()

    # Structured logging (JSON only in production)
    json_logs = settings.ENV == "production"
    setup_logging(level=settings.LOG_LEVEL, json_logs=json_logs)
    logger = get_logger(__name__)

    logger.info(f"Creating Vigie application (ENV={settings.ENV})")

    override_container(container or DIContainer(settings=settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Vigie application...")
        app_container = await initialize_container()

        startup_refresh: Optional[asyncio.Task] = None
        if settings.REFRESH_ON_STARTUP:
            startup_refresh = asyncio.create_task(
                app_container.dashboard_state.refresh()
            )
            logger.info("Initial dashboard refresh scheduled")

        logger.info("Vigie application started successfully")

        yield

        logger.info("Shutting down Vigie application...")
        if startup_refresh is not None and not startup_refresh.done():
            startup_refresh.cancel()
            try:
                await startup_refresh
            except asyncio.CancelledError:
                logger.info("Initial dashboard refresh cancelled")

        await shutdown_container()
        logger.info("Vigie application shutdown complete")

    app = FastAPI(
        title="Vigie API",
        description="Multi-chain USDC metrics",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware chain
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(VigieException, vigie_exception_handler)

    # Register routes
    app.include_router(health.router, prefix="/api")
    app.include_router(dashboard.router, prefix="/api")
    app.include_router(networks.router, prefix="/api")
    app.include_router(wallet.router, prefix="/api")

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint."""
        return {
            "service": "Vigie",
            "status": "running",
            "version": __version__,
            "description": "Multi-chain USDC metrics",
        }

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

    logger.info("Vigie application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Get or create application instance.

    For uvicorn: uvicorn vigie.main:get_app --factory
    """
    return create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "vigie.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
    )


if __name__ == "__main__":
    main()
