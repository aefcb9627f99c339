"""
Workout session database model.

A session groups everything a user logged on one calendar day.
Strength lifts and metcon workouts point back to it by
``workout_session_id`` and reach the session date through an
explicit join in the repositories.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class WorkoutSession(SQLModel, table=True):
    """A single training day for a user (at most one per date)."""

    __tablename__ = "workout_sessions"
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_workout_session_user_date"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)
    notes: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))
    updated_at: datetime.datetime = Field(default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))
