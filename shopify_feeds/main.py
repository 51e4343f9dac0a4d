"""
Main FastAPI application
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shopify_feeds.api.v1 import feeds, health
from shopify_feeds.core.config import settings
from shopify_feeds.core.exceptions import ConfigurationError, FeedsException
from shopify_feeds.core.logging import get_logger, setup_logging
from shopify_feeds.models.responses import ErrorResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    setup_logging()
    logger.info(
        f"{settings.PROJECT_NAME} starting",
        version=settings.VERSION,
        api_version=settings.SHOPIFY_API_VERSION,
    )
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Importable JSON feeds of Shopify products, variants and collections",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Include API routers
app.include_router(feeds.router, prefix="/feeds", tags=["feeds"])
app.include_router(health.router, prefix="/health", tags=["health"])


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"{settings.PROJECT_NAME} is running",
        "version": settings.VERSION,
        "feeds": ["/feeds/products", "/feeds/variants", "/feeds/collections"],
        "health": "/health",
    }


# Error handlers
@app.exception_handler(FeedsException)
async def feeds_exception_handler(request: Request, exc: FeedsException):
    """Turn configuration and upstream failures into JSON error responses"""
    if isinstance(exc, ConfigurationError):
        logger.error("Configuration error", path=request.url.path, error=exc.to_dict())
    else:
        logger.error("Feed failed", path=request.url.path, error=exc.to_dict())

    error = ErrorResponse(
        message=exc.message,
        error=exc.__class__.__name__,
        error_code=exc.error_code,
        details=exc.details,
    )
    return JSONResponse(
        status_code=exc.status_code, content=error.model_dump(mode="json")
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Unhandled exception: {exc}", path=request.url.path)
    error = ErrorResponse(
        message=str(exc),
        error=exc.__class__.__name__,
        error_code="INTERNAL_ERROR",
    )
    return JSONResponse(status_code=500, content=error.model_dump(mode="json"))
