"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoicebuddy.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from invoicebuddy.api.middleware.error_handler import setup_exception_handlers
from invoicebuddy.api.routes import (
    customers_router,
    dashboard_router,
    health_router,
    invoices_router,
    products_router,
    reports_router,
)
from invoicebuddy.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Creates the data directory and any missing collection files before the
    first request is served.
    """
    settings = get_settings()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        debug=settings.api.debug,
        data_dir=str(settings.storage.data_dir),
    )

    try:
        from invoicebuddy.infrastructure.storage.jsonfile import get_record_store

        await get_record_store()
        logger.info("record_store_ready")

    except Exception as e:
        logger.error("record_store_init_failed", error=str(e))
        raise

    logger.info("application_started")

    yield

    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Customers, products, invoices and sales reports",
        version=settings.app_version,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    # Add middleware; the last one added runs outermost
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(LoggingMiddleware)

    # CORS
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(customers_router)
    app.include_router(products_router)
    app.include_router(invoices_router)
    app.include_router(reports_router)
    app.include_router(dashboard_router)

    # Root health endpoint (for container health checks)
    @app.get("/health")
    async def root_health() -> dict[str, str]:
        """Simple health check at root level."""
        return {
            "status": "healthy",
            "version": settings.app_version,
        }

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Serve the app with uvicorn using the API settings."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "invoicebuddy.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )


if __name__ == "__main__":
    run()
