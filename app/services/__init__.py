"""Business logic services."""

from app.services.progress_service import ProgressService

__all__ = [
    "ProgressService",
]
