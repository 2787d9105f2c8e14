"""
FastAPI Relay Application Factory
=================================

This is the main entry point for the Mint Factory API server, a relay that
sits between clients and the local mint factory deploy service.

Architecture:
    Clients → Relay (this service) → Deploy service (localhost:7890/deploy)

Routes:
    - POST /create-collection : Relayed to the deploy service (requires x-api-key)
    - GET  /health            : Health check endpoint (no auth)

Environment Variables:
    - PORT: Listen port (default: 3000)
    - HOST: Bind address (default: 0.0.0.0)
    - API_KEY: Expected x-api-key value; unset rejects every gated request
    - DEPLOY_SERVICE_URL: Deploy service base URL (default: http://localhost:7890)
    - REQUEST_TIMEOUT_SECONDS: Deploy round-trip timeout (default: 90)
    - LOG_LEVEL: Logging level (default: INFO)

Running the Service:
    Development:
        uvicorn relay.app.main:app --reload --port 3000

    Production:
        python -m relay.app.main
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from relay.app.config import Settings, get_settings
from relay.app.models import ErrorResponse, HealthResponse
from relay.app.proxy import proxy_router
from relay.app.proxy.forward import build_deploy_client

NOT_FOUND_MESSAGE = "Endpoint not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


# Configure structured JSON logging
def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s", "module": "%(module)s", "function": "%(funcName)s"}',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


# Lifespan context manager for startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup tasks:
        - Configure logging
        - Create the pooled deploy service HTTP client

    Shutdown tasks:
        - Close the deploy service HTTP client
    """
    settings: Settings = app.state.settings

    setup_logging(settings.LOG_LEVEL)
    logger = logging.getLogger("relay.main")

    app.state.deploy_client = build_deploy_client(
        settings.deploy_service_url_str,
        settings.REQUEST_TIMEOUT_SECONDS,
    )
    logger.info(
        f"Mint Factory API Server running at http://localhost:{settings.PORT}",
        extra={
            "deploy_service_url": settings.deploy_service_url_str,
            "request_timeout_seconds": settings.REQUEST_TIMEOUT_SECONDS,
            "api_key_configured": settings.API_KEY is not None,
        }
    )

    yield

    # Shutdown
    logger.info("Shutting down relay service")
    await app.state.deploy_client.aclose()
    app.state.deploy_client = None


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application instance with:
        - Lifespan management
        - CORS middleware
        - Route handlers
        - Exception handlers

    Args:
        settings: Immutable configuration; loaded from the environment when
                  omitted

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Mint Factory API Server",
        description="Relay for collection creation requests to the mint factory deploy service",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.deploy_client = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-Api-Key"],
    )

    # Health check endpoint
    @app.get("/health", tags=["System"])
    async def health_check() -> Dict[str, str]:
        """Liveness check. Bypasses the API key gate."""
        return HealthResponse().model_dump()

    # Proxy router: relays collection creation to the deploy service
    app.include_router(proxy_router, tags=["Collections"])

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """
        Map routing and HTTP errors onto the relay's error body.

        Unknown paths and unsupported methods both answer 404
        "Endpoint not found".
        """
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND,
            status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=ErrorResponse(error=NOT_FOUND_MESSAGE).to_json()
            )

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=str(exc.detail)).to_json(),
            headers=getattr(exc, "headers", None)
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """
        Global exception handler for unhandled errors.

        Logs the error and returns the relay's error body.
        """
        logger = logging.getLogger("relay.main")
        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "exception_type": type(exc).__name__
            },
            exc_info=True
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=str(exc) or INTERNAL_ERROR_MESSAGE).to_json()
        )

    return app


# Create app instance for uvicorn; configuration is read once here
app = create_app(get_settings())


def run() -> None:
    """Start uvicorn on the configured host and port."""
    settings: Settings = app.state.settings

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":  # pragma: no cover
    run()
