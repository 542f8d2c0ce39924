"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() builds an app from Settings and an optional Database handle
   - Tests pass their own settings and database

2. Lifespan Events
   - startup: create missing tables
   - shutdown: dispose the connection pool

3. Exception Handlers
   - Map domain exceptions to the {"code", "message"} error envelope
   - Request binding errors become 400 instead of FastAPI's default 422
   - Storage and unexpected errors are logged, never echoed to the client
"""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import Settings, get_settings
from app.database import Database
from app.exceptions import NotFoundError, StorageError, ValidationError
from app.routers import books_router
from app.schemas import ErrorCode

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred."


def error_response(status_code: int, code: ErrorCode, message: str) -> JSONResponse:
    """Build the JSON error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"code": code.value, "message": message},
    )


def format_request_errors(errors: list[dict[str, Any]]) -> str:
    """
    Turn FastAPI's request validation errors into one readable message.

    A non-numeric book id gets a dedicated message; everything else is
    rendered as "field: reason" pairs.
    """
    messages = []
    for error in errors:
        loc = error.get("loc", ())
        if tuple(loc[:2]) == ("path", "book_id"):
            return "ID should be a number"
        field = ".".join(str(part) for part in loc[1:]) or str(loc[0] if loc else "request")
        messages.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(messages) or "Invalid request"


# =============================================================================
# Application Factory
# =============================================================================
def create_app(
    app_settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to get_settings())
        database: Database handle to use (defaults to one built from settings)

    Returns:
        Configured FastAPI application instance
    """
    if app_settings is None:
        app_settings = get_settings()
    if database is None:
        database = Database.from_settings(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        Code before yield: Runs on startup
        Code after yield: Runs on shutdown
        """
        logger.info(f"Starting {app_settings.app_name}...")
        logger.info(f"Debug mode: {app_settings.debug}")

        if app_settings.db_create_tables:
            database.create_tables()

        yield

        logger.info(f"Shutting down {app_settings.app_name}...")
        database.dispose()

    app = FastAPI(
        title=app_settings.app_name,
        description="""
## Books API

A small RESTful API for managing books.

- `POST /books` creates a book
- `GET /books` lists books page by page
- `GET /books/{id}`, `PUT /books/{id}`, `DELETE /books/{id}` work on one book

Errors are returned as `{"code": ..., "message": ...}`.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = database

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if app_settings.debug:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            """Log one line per request in debug mode."""
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> "
                f"{response.status_code} ({elapsed_ms:.1f} ms)"
            )
            return response

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Body, query and path binding failures."""
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            ErrorCode.VALIDATION_ERROR,
            format_request_errors(exc.errors()),
        )

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """Empty title or author."""
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            ErrorCode.VALIDATION_ERROR,
            exc.message,
        )

    @app.exception_handler(NotFoundError)
    async def not_found_exception_handler(
        request: Request,
        exc: NotFoundError,
    ) -> JSONResponse:
        return error_response(
            status.HTTP_404_NOT_FOUND,
            ErrorCode.NOT_FOUND,
            f"{exc.entity} not found",
        )

    @app.exception_handler(StorageError)
    async def storage_exception_handler(
        request: Request,
        exc: StorageError,
    ) -> JSONResponse:
        """
        Handle database failures.

        Logs the actual error (with its SQLAlchemy cause) while hiding
        details from clients.
        """
        logger.error(f"Database error: {exc}", exc_info=exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCode.INTERNAL_SERVER_ERROR,
            INTERNAL_ERROR_MESSAGE,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all. The message is generic even in debug mode."""
        logger.error(f"Unhandled error: {exc}", exc_info=exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorCode.INTERNAL_SERVER_ERROR,
            INTERNAL_ERROR_MESSAGE,
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database answers.",
    )
    def health_check() -> dict:
        """
        Health check endpoint.

        Used by load balancers, container probes and monitoring.
        """
        database_ok = database.ping()
        return {
            "status": "healthy" if database_ok else "degraded",
            "app": app_settings.app_name,
            "environment": app_settings.environment,
            "database": database_ok,
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn app.main:app
app = create_app(settings)


# =============================================================================
# Development Server
# =============================================================================
# This allows running the app directly with: python -m app.main
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
