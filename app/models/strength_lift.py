"""
Strength lift database model.

Weights and durations are logged in quarter-unit increments
(``x.0``, ``x.25``, ``x.5``, ``x.75``); validation happens on the
write path, analytics only read these rows.
"""

import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class SetStructure(str, Enum):
    """How a lift was performed.

    Only ``SETS_REPS`` carries a weight that is comparable across
    entries; the other structures are skipped by weight-based analytics.
    """

    SETS_REPS = "SetsReps"
    EMOM = "EMOM"
    AMRAP = "AMRAP"
    TIME_BASED = "TimeBased"


class StrengthLift(SQLModel, table=True):
    """A strength exercise performed within a workout session."""

    __tablename__ = "strength_lifts"

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_session_id: int = Field(foreign_key="workout_sessions.id", nullable=False, index=True)
    exercise_type_id: int = Field(foreign_key="exercise_types.id", nullable=False, index=True)

    set_structure: str = Field(default=SetStructure.SETS_REPS.value, nullable=False, max_length=20)
    sets: Optional[int] = Field(default=None)
    reps: Optional[int] = Field(default=None)

    weight: float = Field(default=0.0, nullable=False)
    additional_weight: Optional[float] = Field(default=None)
    duration: Optional[float] = Field(default=None)
    rest_period: Optional[float] = Field(default=None)

    comments: Optional[str] = Field(default=None, max_length=500)

    # Position within the session
    order: int = Field(default=1, nullable=False)

    created_at: datetime.datetime = Field(default_factory=lambda: datetime.datetime.now(datetime.timezone.utc))

    @property
    def is_sets_reps(self) -> bool:
        """True for a ``SetsReps`` lift with both ``sets`` and ``reps`` logged."""
        return (self.set_structure == SetStructure.SETS_REPS.value and self.sets is not None
                and self.reps is not None)
