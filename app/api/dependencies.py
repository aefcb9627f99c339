"""
Shared API dependencies.

Authentication happens upstream: the gateway verifies the caller and
forwards the user id in the ``X-User-Id`` header.
"""

from fastapi import Depends, Header, HTTPException, status
from sqlmodel import Session

from app.db.session import get_db
from app.services.progress_service import ProgressService


def get_current_user_id(x_user_id: int | None = Header(None, description="Authenticated user id")) -> int:
    """Extract the current user id set by the gateway."""
    if x_user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing user identity")
    return x_user_id


def get_progress_service(db: Session = Depends(get_db)) -> ProgressService:
    return ProgressService(db)
