"""SQLModel database models."""

from app.models.user import User
from app.models.reference import ExerciseType, MetconType
from app.models.workout_session import WorkoutSession
from app.models.strength_lift import SetStructure, StrengthLift
from app.models.metcon_workout import MetconWorkout

__all__ = [
    "User",
    "ExerciseType",
    "MetconType",
    "WorkoutSession",
    "SetStructure",
    "StrengthLift",
    "MetconWorkout",
]
