import logging

from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes.employees import router as employees_router
from app.api.routes.health import router as health_router
from app.api.routes.organizations import router as organizations_router
from app.core.config import settings
from app.core.db import init_models, reset_async_engine
from app.core.errors import DirectoryError, get_status_code
from app.core.observability import (
    ObservabilityMiddleware,
    configure_structured_logging,
    extract_request_context,
    metrics_endpoint,
)

# Configure structured logging before creating logger
if settings.observability_structured_logs:
    configure_structured_logging(settings.app_log_level)

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Sets up:
    - Structured logging with correlation IDs
    - Observability middleware (metrics, request tracking)
    - CORS middleware
    - Exception handlers for domain errors
    - API routers
    - Metrics endpoint for Prometheus scraping
    """
    app = FastAPI(
        title="Organization Directory API",
        description="Organizations, employees, and filtered employee listings",
        version="0.1.0",
    )

    @app.on_event("startup")
    async def startup_database():
        """Create tables on SQLite; PostgreSQL schemas are managed outside the app."""
        if settings.is_sqlite:
            await init_models()

    @app.on_event("shutdown")
    async def shutdown_database():
        await reset_async_engine()

    # ============================================================================
    # Observability Middleware (must be first for correlation tracking)
    # ============================================================================

    if settings.observability_enabled:
        app.add_middleware(
            ObservabilityMiddleware,
            header_name=settings.observability_request_id_header,
        )

    # ============================================================================
    # CORS Configuration
    # ============================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ============================================================================
    # Exception Handlers
    # ============================================================================

    @app.exception_handler(DirectoryError)
    async def directory_error_handler(request: Request, exc: DirectoryError) -> JSONResponse:
        """
        Handle domain-specific errors from the directory service.

        Maps domain exceptions to appropriate HTTP status codes and
        returns structured error responses.

        Args:
            request: The incoming request
            exc: The domain exception raised

        Returns:
            JSON response with error details
        """
        status_code = get_status_code(exc)

        context = {
            "details": exc.details,
            "path": request.url.path,
            **extract_request_context(request),
        }

        if status_code >= 500:
            logger.error(f"{exc.__class__.__name__}: {exc.message}", extra=context)
        elif status_code >= 400:
            logger.warning(f"{exc.__class__.__name__}: {exc.message}", extra=context)

        return JSONResponse(
            status_code=status_code,
            content={
                "error": exc.__class__.__name__,
                "message": exc.message,
                "details": exc.details,
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        """
        Handle FastAPI HTTP exceptions.

        Provides consistent error response format for all HTTP exceptions.
        """
        if exc.status_code >= 500:
            logger.error(
                f"HTTP {exc.status_code}: {exc.detail}",
                extra={"path": request.url.path, **extract_request_context(request)},
            )

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "HTTPException",
                "message": exc.detail,
                "details": {},
            },
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """
        Catch-all handler for unexpected exceptions.

        Logs the full exception and returns a generic 500 error to the client
        without exposing internal implementation details.
        """
        context = {
            "path": request.url.path if request.url else "unknown",
            **extract_request_context(request),
        }
        logger.error(f"Unhandled exception: {exc}", exc_info=True, extra=context)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "InternalServerError",
                "message": "An unexpected error occurred",
                "details": {},
            },
        )

    # ============================================================================
    # Router Registration
    # ============================================================================

    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(organizations_router, prefix=API_PREFIX)
    app.include_router(employees_router, prefix=API_PREFIX)

    # ============================================================================
    # Metrics Endpoint (Prometheus)
    # ============================================================================

    async def metrics(request: Request) -> Response:
        """Prometheus metrics in text exposition format."""
        return metrics_endpoint()

    if settings.observability_enabled:
        app.add_route("/metrics", metrics)

    return app


app = create_app()
