"""
Personal records and training volume.

Both computations share the ``SetsReps`` filter: a lift takes part only
when it is a straight-set entry with ``sets`` and ``reps`` logged, so
volume is never computed from a defaulted field.
"""

from __future__ import annotations

import datetime
from typing import Collection, Iterable, Optional

from app.models.reference import ExerciseType
from app.models.strength_lift import StrengthLift
from app.progress.config import in_window, require_positive, window
from app.schemas.progress import ExerciseVolume, PersonalRecord, VolumeDataPoint, VolumeTrendPoint


def lift_volume(lift: StrengthLift) -> float:
    """``weight x reps x sets`` for a qualifying lift."""
    return lift.weight * lift.reps * lift.sets


# ======================================================================
# Personal records
# ======================================================================


def personal_records(lifts: Iterable[tuple[datetime.date, StrengthLift]], exercise_types: Iterable[ExerciseType],
                     as_of: Optional[datetime.date] = None, recent_days: int = 30,
                     exercise_type_ids: Optional[Collection[int]] = None,
                     limit: Optional[int] = None, ) -> list[PersonalRecord]:
    """Heaviest qualifying lift per exercise type, heaviest record first.

    The first lift seen at the top weight wins ties.  Exercise types
    without a qualifying lift are omitted.

    Args:
        lifts: All-time ``(session date, lift)`` pairs of one user.
        exercise_types: Exercise type lookup; its order breaks weight ties.
        as_of: Reference date for ``is_recent_pr``; without it no record
            is flagged recent.
        recent_days: Window ``[as_of - recent_days, as_of]`` for the flag.
        exercise_type_ids: Only report these exercise types.
        limit: Keep at most this many records, after sorting.
    """
    if limit is not None:
        require_positive("limit", limit)
    recent = window(as_of, recent_days) if as_of is not None else None
    wanted = set(exercise_type_ids) if exercise_type_ids is not None else None

    best: dict[int, tuple[datetime.date, StrengthLift]] = {}
    for date, lift in lifts:
        if not lift.is_sets_reps:
            continue
        current = best.get(lift.exercise_type_id)
        if current is None or lift.weight > current[1].weight:
            best[lift.exercise_type_id] = (date, lift)

    records = []
    for exercise_type in exercise_types:
        found = best.get(exercise_type.id)
        if found is None or (wanted is not None and exercise_type.id not in wanted):
            continue
        date, lift = found
        records.append(PersonalRecord(exercise_type_id=exercise_type.id, exercise_type_name=exercise_type.name,
                                      max_weight=lift.weight, reps=lift.reps, sets=lift.sets,
                                      achieved_date=date, workout_session_id=lift.workout_session_id,
                                      is_recent_pr=recent is not None and in_window(date, recent), ))

    # sorted() is stable, ties keep exercise type order
    ranked = sorted(records, key=lambda r: r.max_weight, reverse=True)
    return ranked[:limit] if limit is not None else ranked


# ======================================================================
# Volume
# ======================================================================


def volume_series(lifts: Iterable[tuple[datetime.date, StrengthLift]], as_of: datetime.date,
                  period_days: int, ) -> list[VolumeDataPoint]:
    """Daily training volume over the window, ascending by date."""
    bounds = window(as_of, period_days)

    totals: dict[datetime.date, list] = {}
    for date, lift in lifts:
        if not (in_window(date, bounds) and lift.is_sets_reps):
            continue
        acc = totals.setdefault(date, [0.0, 0])
        acc[0] += lift_volume(lift)
        acc[1] += 1

    return [VolumeDataPoint(date=date, total_volume=volume, total_lifts=count)
            for date, (volume, count) in sorted(totals.items())]


def volume_trends(lifts: Iterable[tuple[datetime.date, StrengthLift]], exercise_types: Iterable[ExerciseType],
                  as_of: datetime.date, period_days: int,
                  exercise_type_ids: Optional[Collection[int]] = None, ) -> list[VolumeTrendPoint]:
    """Daily volume with workout count, per-workout average and exercise breakdown.

    The breakdown is ordered by volume, heaviest first (ties keep the order
    exercises were first logged that day).  Exercise types missing from the
    lookup are reported with no name.
    """
    bounds = window(as_of, period_days)
    names = {t.id: t.name for t in exercise_types}
    wanted = set(exercise_type_ids) if exercise_type_ids is not None else None

    days: dict[datetime.date, tuple[set, dict[int, float]]] = {}
    for date, lift in lifts:
        if not (in_window(date, bounds) and lift.is_sets_reps):
            continue
        if wanted is not None and lift.exercise_type_id not in wanted:
            continue
        session_ids, by_exercise = days.setdefault(date, (set(), {}))
        session_ids.add(lift.workout_session_id)
        by_exercise[lift.exercise_type_id] = by_exercise.get(lift.exercise_type_id, 0.0) + lift_volume(lift)

    trends = []
    for date, (session_ids, by_exercise) in sorted(days.items()):
        volume = sum(by_exercise.values())
        breakdown = [
            ExerciseVolume(exercise_type_id=type_id, exercise_type_name=names.get(type_id), volume=type_volume)
            for type_id, type_volume in sorted(by_exercise.items(), key=lambda item: item[1], reverse=True)
        ]
        trends.append(VolumeTrendPoint(date=date, total_volume=volume, workout_count=len(session_ids),
                                       average_volume_per_workout=round(volume / len(session_ids), 2),
                                       exercise_breakdown=breakdown, ))
    return trends


def total_volume(lifts: Iterable[tuple[datetime.date, StrengthLift]]) -> float:
    """All-time volume, rounded to two decimals."""
    return round(sum(lift_volume(lift) for _, lift in lifts if lift.is_sets_reps), 2)


def most_frequent_exercise(lifts: Iterable[tuple[datetime.date, StrengthLift]],
                           exercise_types: Iterable[ExerciseType], ) -> Optional[str]:
    """Name logged most often; ties go to the name encountered first.

    Lifts whose exercise type is missing from the lookup are ignored.
    """
    names = {t.id: t.name for t in exercise_types}
    counts: dict[str, int] = {}
    for _, lift in lifts:
        name = names.get(lift.exercise_type_id)
        if name is not None:
            counts[name] = counts.get(name, 0) + 1

    top: Optional[str] = None
    for name, count in counts.items():
        if top is None or count > counts[top]:
            top = name
    return top
