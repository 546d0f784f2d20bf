"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import AuthenticationError, ExternalServiceError
from modules.auth.routes import router as auth_router
from .models import ErrorResponse
from .responses import detail_response, internal_error
from .routes import analytics, conversations, documents, health, users

logger = logging.getLogger(__name__)

# Documented on every router; the bodies are relayed or synthesized, never validated
ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "No session cookie or session rejected"},
    500: {"model": ErrorResponse, "description": "Backend unreachable or unreadable"},
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(
        f"Starting {settings.app_name} on {settings.host}:{settings.port}, "
        f"forwarding to {settings.backend_url}"
    )
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """Missing or rejected session: 401 with the error message as detail."""
    return detail_response(exc.message, 401)


async def external_service_error_handler(request: Request, exc: ExternalServiceError) -> JSONResponse:
    """Transport or decoding failure talking to the backend."""
    logger.warning(f"{request.method} {request.url.path} failed upstream: {exc.code} {exc.message}")
    return internal_error()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Session-cookie gateway in front of the PDF chat backend",
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

    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(ExternalServiceError, external_service_error_handler)

    # Register routes
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"], responses=ERROR_RESPONSES)
    app.include_router(health.router, prefix="/api", tags=["monitoring"], responses=ERROR_RESPONSES)
    app.include_router(documents.router, prefix="/api", tags=["documents"], responses=ERROR_RESPONSES)
    app.include_router(conversations.router, prefix="/api/conversations", tags=["conversations"], responses=ERROR_RESPONSES)
    app.include_router(analytics.router, prefix="/api/analytics", tags=["analytics"], responses=ERROR_RESPONSES)
    app.include_router(users.router, prefix="/api/user", tags=["users"], responses=ERROR_RESPONSES)

    return app


# Application instance for uvicorn
app = create_app()
