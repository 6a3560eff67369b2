"""
Main FastAPI application entry point.

Uses Application Factory Pattern; the DI container (and with it the chain
connection) is created per application and closed on shutdown.
"""

import socket
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vigie.config.settings import Settings, get_settings
from vigie.di.container import DIContainer
from vigie.domain.exceptions import VigieException
from vigie.infrastructure.monitoring import get_logger, setup_logging
from vigie.presentation.api.middleware import (
    RequestIDMiddleware,
    unhandled_exception_handler,
    vigie_exception_handler,
)
from vigie.presentation.api.routes import (
    health_router,
    items_router,
    report_router,
    stats_router,
)

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)
        container: Optional pre-built DI container (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()
    if container is None:
        container = DIContainer(settings)

    setup_logging(level=settings.LOG_LEVEL, json_logs=settings.ENV == "production")
    logger.info(f"Creating Vigie application (ENV={settings.ENV})")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Initializing runtime configuration...")
        await container.initialize()
        logger.info("Vigie application started successfully")

        yield

        logger.info("Shutting down Vigie application...")
        await container.shutdown()
        logger.info("Vigie application shutdown complete")

    app = FastAPI(
        title="Vigie API",
        description="Read-only escrow contract and token reporting",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.container = container

    # Middleware chain (order matters!)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(VigieException, vigie_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register routes
    app.include_router(health_router)
    app.include_router(report_router)
    app.include_router(stats_router)
    app.include_router(items_router)

    @app.get("/", tags=["health"])
    async def root():
        """Root endpoint."""
        return {
            "service": "vigie",
            "version": settings.APP_VERSION,
            "status": "operational",
            "endpoints": {
                "health": "/health",
                "report": "/report",
                "deal": "/report/deal/{dealId}",
                "stats": "/stats",
                "items": "/items",
            },
        }

    return app


def get_app() -> FastAPI:
    """
    Get or create application instance (lazy initialization).

    For uvicorn: uvicorn vigie.main:get_app --factory
    """
    return create_app()


# For: uvicorn vigie.main:app
app: Optional[FastAPI] = None


def __getattr__(name: str):
    """Module-level __getattr__ for lazy app initialization."""
    global app
    if name == "app":
        if app is None:
            app = create_app()
        return app
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def find_available_port(host: str, start_port: int, attempts: int) -> int:
    """
    Find the first bindable TCP port at or after start_port.

    Args:
        host: Interface to bind
        start_port: First port to try
        attempts: How many consecutive ports to try

    Returns:
        A port that could be bound at probe time

    Raises:
        RuntimeError: If every candidate port is busy
    """
    last_port = min(start_port + attempts, 65536)
    for port in range(start_port, last_port):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            try:
                sock.bind((host, port))
            except OSError:
                logger.warning(
                    f"Port {port} is already in use. Trying port {port + 1}..."
                )
                continue
        return port

    raise RuntimeError(
        f"No free port in range {start_port}-{last_port - 1} on {host}"
    )


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(level=settings.LOG_LEVEL, json_logs=settings.ENV == "production")

    port = find_available_port(
        settings.API_HOST, settings.API_PORT, settings.PORT_SEARCH_LIMIT
    )
    logger.info(f"Backend running at http://localhost:{port}")

    uvicorn.run(
        "vigie.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=port,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
