"""
Composite read models: dashboard, recent achievements, overview.

These are derived views over the other engine functions and follow the
same window and ordering rules.
"""

from __future__ import annotations

import datetime
from typing import Sequence

from app.models.reference import ExerciseType
from app.models.strength_lift import StrengthLift
from app.models.workout_session import WorkoutSession
from app.progress.config import in_window, require_positive, window
from app.progress.frequency import average_per_week, current_streak, longest_streak, workout_frequency
from app.progress.records import most_frequent_exercise, personal_records, total_volume
from app.schemas.progress import Achievement, DashboardSummary, PersonalRecord, ProgressOverview


def _format_weight(weight: float) -> str:
    return f"{weight:.2f}".rstrip("0").rstrip(".")


def dashboard_summary(sessions: Sequence[WorkoutSession], lifts: Sequence[tuple[datetime.date, StrengthLift]],
                      exercise_types: Sequence[ExerciseType], as_of: datetime.date,
                      window_days: int = 30, ) -> DashboardSummary:
    """Headline numbers for the dashboard.

    Totals are all-time; the streak and weekly average come from the
    frequency stats over the last *window_days*.
    """
    frequency = workout_frequency(sessions, as_of, window_days)

    return DashboardSummary(total_workouts=len(sessions), total_volume_lifted=total_volume(lifts),
                            personal_records=len(personal_records(lifts, exercise_types)),
                            current_streak=frequency.current_streak,
                            last_workout_date=max((s.date for s in sessions), default=None),
                            most_frequent_exercise=most_frequent_exercise(lifts, exercise_types),
                            average_workouts_per_week=frequency.average_workouts_per_week, )


def recent_achievements(records: Sequence[PersonalRecord], as_of: datetime.date, limit: int = 5,
                        days: int = 30, ) -> list[Achievement]:
    """Personal records set within ``[as_of - days, as_of]``, newest first."""
    require_positive("limit", limit)
    require_positive("days", days)
    bounds = window(as_of, days)

    recent = sorted((r for r in records if in_window(r.achieved_date, bounds)), key=lambda r: r.achieved_date,
                    reverse=True)

    return [
        Achievement(title=f"Personal Record: {r.exercise_type_name}",
                    description=f"New PR of {_format_weight(r.max_weight)}lbs for {r.reps} reps",
                    achieved_date=r.achieved_date, type="PR", value=r.max_weight,
                    exercise_type_id=r.exercise_type_id, exercise_type_name=r.exercise_type_name,
                    workout_session_id=r.workout_session_id, )
        for r in recent[:limit]
    ]


def progress_overview(sessions: Sequence[WorkoutSession], strength_lift_count: int, metcon_workout_count: int,
                      as_of: datetime.date, ) -> ProgressOverview:
    """All-time totals; the weekly average spans first session to *as_of*."""
    dates = [s.date for s in sessions]
    first = min(dates, default=None)
    last = max(dates, default=None)
    span_days = (as_of - first).days + 1 if first is not None else 0

    return ProgressOverview(total_workouts=len(sessions), total_workout_days=len(set(dates)),
                            total_strength_lifts=strength_lift_count, total_metcon_workouts=metcon_workout_count,
                            first_workout_date=first, last_workout_date=last,
                            current_streak=current_streak(dates, as_of), longest_streak=longest_streak(dates),
                            average_workouts_per_week=average_per_week(len(sessions), span_days), )
