"""Database repositories."""

from app.db.repositories.workout_session import WorkoutSessionRepository
from app.db.repositories.strength_lift import StrengthLiftRepository
from app.db.repositories.metcon_workout import MetconWorkoutRepository
from app.db.repositories.reference import ExerciseTypeRepository, MetconTypeRepository

__all__ = [
    "WorkoutSessionRepository",
    "StrengthLiftRepository",
    "MetconWorkoutRepository",
    "ExerciseTypeRepository",
    "MetconTypeRepository",
]
