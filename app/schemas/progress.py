"""
Progress analytics schemas.

Every result is a frozen value object built fresh on each call; none
of them references the ORM rows it was computed from.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _ValueObject(BaseModel):
    model_config = ConfigDict(frozen=True)


class ProgressDataPoint(_ValueObject):
    """One point of a progression series (one per day with activity)."""

    date: datetime.date
    value: float = Field(..., description="Top weight (strength) or best time / rounds (metcon)")
    exercise_type_name: Optional[str] = None
    metcon_type_name: Optional[str] = None


class PersonalRecord(_ValueObject):
    """Heaviest ``SetsReps`` lift logged for an exercise type."""

    exercise_type_id: int
    exercise_type_name: str
    max_weight: float
    reps: int
    sets: int
    achieved_date: datetime.date
    workout_session_id: Optional[int] = None
    is_recent_pr: bool = Field(False, description="Set within the recent-achievement window")


class StrengthChartPoint(_ValueObject):
    """One point of a strength chart; ``value`` depends on the chart metric."""

    date: datetime.date
    value: float
    sets: Optional[int] = None
    reps: Optional[int] = None
    workout_session_id: Optional[int] = None


class VolumeDataPoint(_ValueObject):
    date: datetime.date
    total_volume: float = Field(..., description="Sum of weight x reps x sets for the day")
    total_lifts: int


class ExerciseVolume(_ValueObject):
    exercise_type_id: int
    exercise_type_name: Optional[str] = None
    volume: float


class VolumeTrendPoint(_ValueObject):
    """Daily volume with a per-exercise breakdown."""

    date: datetime.date
    total_volume: float
    workout_count: int = Field(..., description="Distinct sessions contributing to the day")
    average_volume_per_workout: float
    exercise_breakdown: list[ExerciseVolume] = Field(default_factory=list)


class WorkoutFrequencyStats(_ValueObject):
    """Session counts and gap-tolerant streaks over a look-back window."""

    total_workouts: int
    total_days: int = Field(..., description="Length of the look-back window in days")
    average_workouts_per_week: float
    current_streak: int
    longest_streak: int


class FrequencyBucket(_ValueObject):
    period_start: datetime.date = Field(..., description="First day of the day / ISO week / month bucket")
    workouts: int
    strength_lifts: int = 0
    metcon_workouts: int = 0


class DashboardSummary(_ValueObject):
    total_workouts: int
    total_volume_lifted: float
    personal_records: int
    current_streak: int
    last_workout_date: Optional[datetime.date] = None
    most_frequent_exercise: Optional[str] = None
    average_workouts_per_week: float


class Achievement(_ValueObject):
    title: str
    description: str
    achieved_date: datetime.date
    type: str = Field(..., description="Achievement kind, currently always 'PR'")
    value: Optional[float] = None
    exercise_type_id: Optional[int] = None
    exercise_type_name: Optional[str] = None
    workout_session_id: Optional[int] = None


class ProgressOverview(_ValueObject):
    """All-time training totals for a user."""

    total_workouts: int
    total_workout_days: int
    total_strength_lifts: int
    total_metcon_workouts: int
    first_workout_date: Optional[datetime.date] = None
    last_workout_date: Optional[datetime.date] = None
    current_streak: int
    longest_streak: int
    average_workouts_per_week: float
