"""
Metcon workout database model.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class MetconWorkout(SQLModel, table=True):
    """A metabolic-conditioning workout performed within a session.

    ``total_time`` is in minutes; AMRAP-style workouts are scored by
    ``rounds_completed`` instead and usually leave it empty.
    """

    __tablename__ = "metcon_workouts"

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_session_id: int = Field(foreign_key="workout_sessions.id", nullable=False, index=True)
    metcon_type_id: int = Field(foreign_key="metcon_types.id", nullable=False, index=True)

    total_time: Optional[float] = Field(default=None)
    rounds_completed: Optional[int] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)

    order: int = Field(default=1, nullable=False)

    created_at: datetime.datetime = Field(default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))
