"""
FastAPI application factory.

Creates and configures the portal application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from modules.client import ApiClientError
from shared.config import get_settings

from .dependencies import get_container
from .models.errors import ErrorResponse
from .routes import health, pages, session

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Mounts the auth context on startup, which runs the one-time session
    check, and releases it on shutdown.
    """
    # Startup
    settings = get_settings()
    container = get_container()
    logger.info(
        f"Starting {settings.app_name} on {settings.host}:{settings.port} "
        f"(backend {container.settings.api_base_url})"
    )
    await container.auth.start()
    yield
    # Shutdown
    await container.auth.close()
    await container.aclose()
    logger.info(f"Shutting down {settings.app_name}")


async def api_client_error_handler(request: Request, exc: ApiClientError) -> JSONResponse:
    """Backend unreachable or answering garbage: report a bad gateway."""
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content=ErrorResponse(**exc.to_dict()).model_dump(),
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Church website portal: session handling and protected pages",
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

    app.add_exception_handler(ApiClientError, api_client_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(session.router, prefix="/api/session", tags=["session"])
    app.include_router(pages.router, tags=["pages"])

    return app


# Application instance for uvicorn
app = create_app()
