"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.exceptions import InvalidArgumentError

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Progress analytics for strength and metcon training logs.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                        content={"detail": exc.message, "parameter": exc.parameter})


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "LiftLog progress API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "liftlog-progress",
        "version": settings.VERSION
    }
