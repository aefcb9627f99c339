"""Run the progress analytics on a sample training log and print the results.

Usage:
    python scripts/simulate_progress.py
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.models.reference import ExerciseType
from app.models.strength_lift import SetStructure, StrengthLift
from app.models.workout_session import WorkoutSession
from app.progress import (dashboard_summary, personal_records, recent_achievements, strength_progression,
                          volume_series, workout_frequency)

EXERCISE_TYPES = [
    ExerciseType(id=1, name="Back Squat", category="Squat"),
    ExerciseType(id=6, name="Deadlift", category="Deadlift"),
    ExerciseType(id=11, name="Bench Press", category="Press"),
]

# (date, exercise type id, structure, sets, reps, weight)
RAW_DATA = [
    ("2026-01-05", 1, SetStructure.SETS_REPS, 5, 5, 185),
    ("2026-01-05", 11, SetStructure.SETS_REPS, 5, 5, 135),
    ("2026-01-07", 6, SetStructure.SETS_REPS, 3, 5, 225),
    ("2026-01-07", 6, SetStructure.EMOM, None, 3, 245),
    ("2026-01-09", 1, SetStructure.SETS_REPS, 5, 5, 195),
    ("2026-01-09", 1, SetStructure.SETS_REPS, 1, 3, 205),
    ("2026-01-12", 11, SetStructure.SETS_REPS, 5, 5, 140),
    ("2026-01-14", 6, SetStructure.SETS_REPS, 3, 5, 235),
    ("2026-01-15", 1, SetStructure.SETS_REPS, 5, 5, 200),
    ("2026-01-17", 11, SetStructure.AMRAP, 1, 12, 115),
    ("2026-01-17", 1, SetStructure.SETS_REPS, 3, 3, 215.5),
]

AS_OF = datetime.date(2026, 1, 18)


def main():
    sessions: dict[str, WorkoutSession] = {}
    lifts: list[tuple[datetime.date, StrengthLift]] = []
    for i, (day, exercise_id, structure, sets, reps, weight) in enumerate(RAW_DATA, start=1):
        date = datetime.date.fromisoformat(day)
        session = sessions.setdefault(day, WorkoutSession(id=len(sessions) + 1, user_id=1, date=date))
        lifts.append((date, StrengthLift(id=i, workout_session_id=session.id, exercise_type_id=exercise_id,
                                         set_structure=structure.value, sets=sets, reps=reps, weight=weight, order=i)))

    print()
    print("=" * 60)
    print("Back Squat progression (top set per day)")
    print("=" * 60)
    squats = [(d, lift) for d, lift in lifts if lift.exercise_type_id == 1]
    for point in strength_progression(squats, AS_OF, 90, "Back Squat"):
        print(f"{point.date.isoformat():<12} {point.value:>8.2f}")

    print()
    print("=" * 60)
    print(f"{'Date':<12} {'Volume':>10} {'Lifts':>6}")
    print("=" * 60)
    for point in volume_series(lifts, AS_OF, 30):
        print(f"{point.date.isoformat():<12} {point.total_volume:>10.1f} {point.total_lifts:>6}")

    stats = workout_frequency(list(sessions.values()), AS_OF, 30)
    records = personal_records(lifts, EXERCISE_TYPES)
    summary = dashboard_summary(list(sessions.values()), lifts, EXERCISE_TYPES, AS_OF)

    print()
    print("=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"Workouts (30d): {stats.total_workouts}  ~{stats.average_workouts_per_week} / week")
    print(f"Streak: current {stats.current_streak}, longest {stats.longest_streak}")
    print(f"Total volume: {summary.total_volume_lifted}")
    print(f"Most frequent: {summary.most_frequent_exercise}")
    print()
    for record in records:
        print(f"PR {record.exercise_type_name:<14} {record.max_weight:>7.2f} "
              f"{record.sets}x{record.reps} on {record.achieved_date}")
    print()
    for achievement in recent_achievements(records, AS_OF, limit=3):
        print(f"{achievement.title}: {achievement.description}")


if __name__ == "__main__":
    main()
