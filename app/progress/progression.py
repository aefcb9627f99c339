"""
Strength and metcon progression series.

Both series are sparse: one point per calendar day with qualifying
activity inside the window, ascending by date.  Days without activity
produce no point; gap handling belongs to the chart code.

Strength
--------
Only ``SetsReps`` lifts with ``sets`` and ``reps`` logged take part.
EMOM / AMRAP / time-based entries carry a weight that is not comparable
with a straight set, so they are filtered out rather than defaulted.
A day's value is its heaviest weight.

The strength chart reuses the same filter and offers three metrics:
``weight`` (every lift), ``maxWeight`` (heaviest lift of the day, first on
ties) and ``volume`` (summed ``weight x reps x sets`` of the day).

Metcon
------
Lower time is better.  Within a day the workout with the lowest
``total_time`` wins; untimed workouts sort after every timed one.  The
day's value is the winner's time, else its rounds, else 0.
"""

from __future__ import annotations

import datetime
import math
from typing import Iterable, Optional

from app.core.exceptions import InvalidArgumentError
from app.models.metcon_workout import MetconWorkout
from app.models.strength_lift import StrengthLift
from app.progress.config import in_window, window
from app.schemas.progress import ProgressDataPoint, StrengthChartPoint


def _group_by_date(pairs: Iterable[tuple[datetime.date, object]]) -> dict[datetime.date, list]:
    groups: dict[datetime.date, list] = {}
    for date, item in pairs:
        groups.setdefault(date, []).append(item)
    return groups


# ======================================================================
# Strength
# ======================================================================


def strength_progression(lifts: Iterable[tuple[datetime.date, StrengthLift]], as_of: datetime.date,
                         period_days: int, exercise_type_name: Optional[str] = None, ) -> list[ProgressDataPoint]:
    """Top ``SetsReps`` weight per day for one exercise type.

    Args:
        lifts: ``(session date, lift)`` pairs for a single exercise type.
        as_of: Reference date (typically today).
        period_days: Look-back window in days.
        exercise_type_name: Display name, ``None`` when the type is unknown.
    """
    bounds = window(as_of, period_days)
    qualifying = ((date, lift) for date, lift in lifts if in_window(date, bounds) and lift.is_sets_reps)

    return [
        ProgressDataPoint(date=date, value=max(lift.weight for lift in day_lifts),
                          exercise_type_name=exercise_type_name)
        for date, day_lifts in sorted(_group_by_date(qualifying).items())
    ]


CHART_METRICS = ("weight", "volume", "maxWeight")


def _chart_point(date: datetime.date, lift: StrengthLift, value: float) -> StrengthChartPoint:
    return StrengthChartPoint(date=date, value=value, sets=lift.sets, reps=lift.reps,
                              workout_session_id=lift.workout_session_id)


def strength_chart(lifts: Iterable[tuple[datetime.date, StrengthLift]], as_of: datetime.date, period_days: int,
                   metric: str = "weight", ) -> list[StrengthChartPoint]:
    """Chart points for one exercise type under *metric* (case-insensitive).

    ``weight`` yields one point per lift in logged order.  ``maxWeight`` and
    ``volume`` yield one point per day; a volume point carries the day's
    total sets and no reps.
    """
    metric_key = metric.lower()
    if metric_key not in {m.lower() for m in CHART_METRICS}:
        raise InvalidArgumentError("metric", f"must be one of {', '.join(CHART_METRICS)}, got '{metric}'")
    bounds = window(as_of, period_days)
    qualifying = [(date, lift) for date, lift in lifts if in_window(date, bounds) and lift.is_sets_reps]

    if metric_key == "weight":
        return [_chart_point(date, lift, lift.weight) for date, lift in sorted(qualifying, key=lambda p: p[0])]

    points = []
    for date, day_lifts in sorted(_group_by_date(qualifying).items()):
        if metric_key == "maxweight":
            top = max(day_lifts, key=lambda lift: lift.weight)
            points.append(_chart_point(date, top, top.weight))
        else:
            volume = sum(lift.weight * lift.reps * lift.sets for lift in day_lifts)
            points.append(StrengthChartPoint(date=date, value=volume, sets=sum(lift.sets for lift in day_lifts),
                                             workout_session_id=day_lifts[0].workout_session_id))
    return points


# ======================================================================
# Metcon
# ======================================================================


def _time_key(workout: MetconWorkout) -> float:
    return workout.total_time if workout.total_time is not None else math.inf


def _score(workout: MetconWorkout) -> float:
    if workout.total_time is not None:
        return workout.total_time
    if workout.rounds_completed is not None:
        return float(workout.rounds_completed)
    return 0.0


def metcon_progression(workouts: Iterable[tuple[datetime.date, MetconWorkout]], as_of: datetime.date,
                       period_days: int, metcon_type_name: Optional[str] = None, ) -> list[ProgressDataPoint]:
    """Best result per day for one metcon type."""
    bounds = window(as_of, period_days)
    in_range = ((date, w) for date, w in workouts if in_window(date, bounds))

    points = []
    for date, day_workouts in sorted(_group_by_date(in_range).items()):
        # min() keeps the first workout on ties
        best = min(day_workouts, key=_time_key)
        points.append(ProgressDataPoint(date=date, value=_score(best), metcon_type_name=metcon_type_name))
    return points
