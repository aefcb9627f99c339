"""
Base database configuration.

Import all models here so ``SQLModel.metadata`` knows every table.
"""

from app.models.user import User  # noqa: F401
from app.models.reference import ExerciseType, MetconType  # noqa: F401
from app.models.workout_session import WorkoutSession  # noqa: F401
from app.models.strength_lift import StrengthLift  # noqa: F401
from app.models.metcon_workout import MetconWorkout  # noqa: F401
