"""
Workout frequency, streaks and the frequency chart.

Streak rule
-----------
One rest day is allowed between training days; two consecutive missed
days end a streak.  A streak counts *session days*, not calendar days
walked.

- **Current streak** walks backward from the reference date one day at
  a time.  A missed day is stepped over once; if the day before it has a
  session the walk continues, otherwise it stops.  A most recent session
  older than yesterday therefore yields 0.
- **Longest streak** scans the ascending distinct session dates and
  extends the running count while consecutive dates are at most two
  calendar days apart.
"""

from __future__ import annotations

import datetime
from collections import Counter
from typing import Callable, Iterable

from app.core.exceptions import InvalidArgumentError
from app.models.metcon_workout import MetconWorkout
from app.models.strength_lift import StrengthLift
from app.models.workout_session import WorkoutSession
from app.progress.config import in_window, window
from app.schemas.progress import FrequencyBucket, WorkoutFrequencyStats

_ONE_DAY = datetime.timedelta(days=1)

# Largest gap (in days) between two session dates that keeps a streak alive.
_MAX_STREAK_GAP = 2


# ======================================================================
# Streaks
# ======================================================================


def current_streak(dates: Iterable[datetime.date], as_of: datetime.date) -> int:
    """Gap-tolerant streak ending at (or one rest day before) *as_of*."""
    days = set(dates)
    if not days:
        return 0

    streak = 0
    check = as_of
    while True:
        if check in days:
            streak += 1
            check -= _ONE_DAY
            continue

        # Rest day: the day before must have a session
        check -= _ONE_DAY
        if check not in days:
            break
        streak += 1
        check -= _ONE_DAY

    return streak


def longest_streak(dates: Iterable[datetime.date]) -> int:
    """Longest gap-tolerant run over the whole date sequence."""
    ordered = sorted(set(dates))
    if not ordered:
        return 0

    best = 0
    running = 1
    for i in range(1, len(ordered)):
        gap = (ordered[i] - ordered[i - 1]).days
        if gap <= _MAX_STREAK_GAP:
            running += 1
        else:
            best = max(best, running)
            running = 1

    return max(best, running)


def average_per_week(total_workouts: int, span_days: int) -> float:
    """Workouts per week over *span_days*, rounded to one decimal."""
    if total_workouts == 0 or span_days <= 0:
        return 0.0
    return round(total_workouts / span_days * 7, 1)


# ======================================================================
# Frequency stats
# ======================================================================


def workout_frequency(sessions: Iterable[WorkoutSession], as_of: datetime.date,
                      period_days: int, ) -> WorkoutFrequencyStats:
    """Session count, weekly average and streaks over the window."""
    bounds = window(as_of, period_days)
    dates = [s.date for s in sessions if in_window(s.date, bounds)]

    return WorkoutFrequencyStats(total_workouts=len(dates), total_days=period_days,
                                 average_workouts_per_week=average_per_week(len(dates), period_days),
                                 current_streak=current_streak(dates, as_of), longest_streak=longest_streak(dates), )


# ======================================================================
# Frequency chart
# ======================================================================


def _week_start(date: datetime.date) -> datetime.date:
    return date - datetime.timedelta(days=date.weekday())


def _month_start(date: datetime.date) -> datetime.date:
    return date.replace(day=1)


_BUCKETS: dict[str, Callable[[datetime.date], datetime.date]] = {
    "day": lambda date: date,
    "week": _week_start,
    "month": _month_start,
}

GROUP_BY_OPTIONS = tuple(_BUCKETS)


def frequency_chart(sessions: Iterable[WorkoutSession], as_of: datetime.date, period_days: int,
                    group_by: str = "week",
                    strength_lifts: Iterable[tuple[datetime.date, StrengthLift]] = (),
                    metcon_workouts: Iterable[tuple[datetime.date, MetconWorkout]] = (), ) -> list[FrequencyBucket]:
    """Session, lift and metcon counts per day, ISO week (Monday start) or month.

    Every logged lift counts, whatever its set structure.  Buckets with no
    session are omitted.
    """
    bucket_of = _BUCKETS.get(group_by.lower())
    if bucket_of is None:
        raise InvalidArgumentError("group_by", f"must be one of {', '.join(GROUP_BY_OPTIONS)}, got '{group_by}'")
    bounds = window(as_of, period_days)

    def _count(dates: Iterable[datetime.date]) -> Counter:
        return Counter(bucket_of(date) for date in dates if in_window(date, bounds))

    workouts = _count(s.date for s in sessions)
    lifts = _count(date for date, _ in strength_lifts)
    metcons = _count(date for date, _ in metcon_workouts)

    return [
        FrequencyBucket(period_start=start, workouts=n, strength_lifts=lifts[start], metcon_workouts=metcons[start])
        for start, n in sorted(workouts.items())
    ]
