"""Catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.categories import router as categories_router
from app.api.health import router as health_router
from app.api.middleware import setup_middleware
from app.api.product_images import router as product_images_router
from app.api.products import router as products_router
from app.domain.exceptions import ErrorCode, ServiceError, details_from_pydantic
from app.infrastructure.config import settings
from app.infrastructure.logging_config import configure_logging
from app.infrastructure.store import get_catalog_stores

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    configure_logging(settings.log_level, settings.log_json)
    logger.info(
        "Starting Catalog API",
        version=settings.api_version,
        debug=settings.debug,
        api_prefix=settings.api_prefix,
    )

    stores = get_catalog_stores()
    logger.info(
        "Catalog ready",
        categories=stores.categories.count(),
        products=stores.products.count(),
    )

    yield

    # Shutdown
    logger.info("Shutting down Catalog API")


app = FastAPI(
    title="Catalog API",
    description="Furniture catalog: category hierarchy, products and image galleries",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(categories_router, prefix=settings.api_prefix)
app.include_router(products_router, prefix=settings.api_prefix)
app.include_router(product_images_router, prefix=settings.api_prefix)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: list | None = None,
) -> JSONResponse:
    """Build a failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "details": details or [],
            },
        },
    )


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Handle catalog service errors."""
    logger.warning(
        "Request rejected",
        path=request.url.path,
        method=request.method,
        error_code=exc.code.value,
        message=exc.message,
    )
    body = exc.to_dict()
    return error_response(exc.status_code, body["code"], body["message"], body["details"])


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed path, query or body input."""
    details = details_from_pydantic(list(exc.errors()))
    logger.warning(
        "Request validation failed",
        path=request.url.path,
        method=request.method,
        error_count=len(details),
    )
    return error_response(
        400,
        ErrorCode.VALIDATION_ERROR.value,
        "Validation failed",
        details,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions (unknown routes, wrong methods) with consistent format."""
    return error_response(
        exc.status_code,
        f"HTTP_{exc.status_code}",
        str(exc.detail),
    )
