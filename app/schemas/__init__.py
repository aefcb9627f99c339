"""Pydantic schemas for request/response validation."""

from app.schemas.progress import (
    Achievement,
    DashboardSummary,
    ExerciseVolume,
    FrequencyBucket,
    PersonalRecord,
    ProgressDataPoint,
    ProgressOverview,
    StrengthChartPoint,
    VolumeDataPoint,
    VolumeTrendPoint,
    WorkoutFrequencyStats,
)

__all__ = [
    "Achievement",
    "DashboardSummary",
    "ExerciseVolume",
    "FrequencyBucket",
    "PersonalRecord",
    "ProgressDataPoint",
    "ProgressOverview",
    "StrengthChartPoint",
    "VolumeDataPoint",
    "VolumeTrendPoint",
    "WorkoutFrequencyStats",
]
