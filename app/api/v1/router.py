"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import progress

api_router = APIRouter()

api_router.include_router(
    progress.router, prefix="/progress", tags=["Progress"]
)
