"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app with its own book store
   - Tests can create as many independent instances as they need

2. Lifespan Events
   - startup/shutdown logging

3. Middleware Stack
   - Rate limiting (slowapi)
   - CORS

4. Exception Handlers
   - CatalogError -> status from the error, X-CUSTOM-ERROR header,
     {errorCode, errorMessage} body
   - Request validation errors -> 400
   - Anything else -> 500
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from catalog.config import get_settings
from catalog.dependencies import BookStoreDep
from catalog.exceptions import CatalogError
from catalog.routers import books_router
from catalog.schemas import ErrorResponse
from catalog.services.book_store import BookStore
from catalog.services.rate_limiter import limiter, rate_limit_exceeded_handler

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Catalog holds {app.state.book_store.count()} books")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Every app owns a fresh BookStore, seeded with the sample books unless
    SEED_SAMPLE_DATA is false.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Book Catalog API

A small REST API over an in-memory book catalog.

### Features
- **Books**: list, fetch, create, update and delete books by ISBN
- **Streaming**: `/books/stream` sends one book per second as server-sent events
- **Errors**: `/books/error` shows the structured error format
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Application State
    # -------------------------------------------------------------------------
    app.state.book_store = (
        BookStore.with_sample_data() if settings.seed_sample_data else BookStore()
    )
    app.state.stream_interval = settings.stream_interval_seconds

    # -------------------------------------------------------------------------
    # Rate Limiting
    # -------------------------------------------------------------------------
    # Attach the limiter to the app state so it can be accessed by decorators
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(CatalogError)
    async def catalog_exception_handler(
        request: Request,
        exc: CatalogError,
    ) -> JSONResponse:
        """
        Handle application errors.

        The status code and the X-CUSTOM-ERROR header both carry the
        error's code; the body carries the code and the message.
        """
        logger.error(f"Application error on {request.url.path}: {exc.message}")
        body = ErrorResponse(error_code=exc.code, error_message=exc.message)
        return JSONResponse(
            status_code=exc.code,
            content=body.model_dump(by_alias=True),
            headers={"X-CUSTOM-ERROR": str(exc.code)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report invalid request bodies as 400 Bad Request."""
        logger.info(f"Invalid request on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        The exception text is only shown in debug mode, and never when
        ENVIRONMENT is production.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug and not settings.is_production:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
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
        description="Check if the API is running and healthy.",
    )
    def health_check(store: BookStoreDep) -> dict:
        """Report API status, catalog size and rate limiting settings."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.api_version,
            "books": store.count(),
            "rate_limiting": {
                "enabled": settings.rate_limit_enabled,
                "default_limit": settings.rate_limit_default,
                "write_limit": settings.rate_limit_write,
            },
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "books": "/books",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn catalog.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m catalog.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
