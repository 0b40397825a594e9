"""
Shopify Product Creator - Main Application
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .products import ErrorResponse, MethodNotAllowed, ProductCreationError
from .routes import products_router

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    logger.info("Starting Shopify Product Creator...")
    if not settings.ct_shared_secret:
        logger.warning("CT_SHARED_SECRET is not set; every request will be rejected")
    logger.info("Application ready")
    yield
    logger.info("Shutting down...")


# Create app
app = FastAPI(
    title="Shopify Product Creator",
    description="Create Shopify products with initial inventory and cost",
    version="1.0.0",
    lifespan=lifespan
)

# Include routers
app.include_router(products_router)


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


@app.exception_handler(ProductCreationError)
async def product_creation_error_handler(request: Request, exc: ProductCreationError):
    """Render request failures as {"ok": false, "error": ...}."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
    return error_response(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Routing errors (404, 405) in the same shape."""
    if exc.status_code == MethodNotAllowed.status_code:
        error = MethodNotAllowed()
        return error_response(error.status_code, error.message, headers=exc.headers)
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Anything else is a 500 in the same shape."""
    logger.error(f"{request.method} {request.url.path} failed unexpectedly", exc_info=exc)
    return error_response(500, str(exc) or "Unexpected error")


@app.get("/health")
async def health():
    """Health check endpoint (no auth required)."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=True
    )
