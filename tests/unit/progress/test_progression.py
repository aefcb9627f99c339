"""Tests for strength and metcon progression series."""

import datetime

import pytest

from app.core.exceptions import InvalidArgumentError
from app.models.metcon_workout import MetconWorkout
from app.models.strength_lift import SetStructure, StrengthLift
from app.progress.progression import metcon_progression, strength_chart, strength_progression

AS_OF = datetime.date(2024, 1, 10)
JAN_1 = datetime.date(2024, 1, 1)
JAN_3 = datetime.date(2024, 1, 3)


# ======================================================================
# Helpers
# ======================================================================


def _lift(
    weight: float,
    structure: SetStructure = SetStructure.SETS_REPS,
    sets: int | None = 3,
    reps: int | None = 5,
) -> StrengthLift:
    return StrengthLift(
        workout_session_id=1,
        exercise_type_id=1,
        set_structure=structure.value,
        sets=sets,
        reps=reps,
        weight=weight,
    )


def _metcon(total_time: float | None = None, rounds: int | None = None) -> MetconWorkout:
    return MetconWorkout(
        workout_session_id=1,
        metcon_type_id=1,
        total_time=total_time,
        rounds_completed=rounds,
    )


# ======================================================================
# Strength
# ======================================================================


class TestStrengthProgression:
    def test_excludes_non_sets_reps(self):
        lifts = [
            (JAN_1, _lift(100, SetStructure.EMOM, sets=None)),
            (JAN_1, _lift(95)),
        ]
        points = strength_progression(lifts, AS_OF, 90)
        assert len(points) == 1
        assert points[0].date == JAN_1
        assert points[0].value == 95

    def test_max_weight_of_the_day(self):
        lifts = [(JAN_1, _lift(185)), (JAN_1, _lift(205)), (JAN_1, _lift(195))]
        points = strength_progression(lifts, AS_OF, 90)
        assert [p.value for p in points] == [205]

    @pytest.mark.parametrize("sets, reps", [(None, 5), (3, None), (None, None)])
    def test_missing_sets_or_reps_excluded(self, sets, reps):
        lifts = [(JAN_1, _lift(300, sets=sets, reps=reps)), (JAN_1, _lift(200))]
        assert strength_progression(lifts, AS_OF, 90)[0].value == 200

    def test_day_with_only_excluded_lifts_has_no_point(self):
        lifts = [(JAN_1, _lift(100, SetStructure.AMRAP)), (JAN_3, _lift(110))]
        points = strength_progression(lifts, AS_OF, 90)
        assert [p.date for p in points] == [JAN_3]

    def test_sorted_ascending_by_date(self):
        lifts = [(JAN_3, _lift(110)), (JAN_1, _lift(100))]
        points = strength_progression(lifts, AS_OF, 90)
        assert [p.date for p in points] == [JAN_1, JAN_3]

    def test_window(self):
        lifts = [
            (AS_OF - datetime.timedelta(days=8), _lift(90)),
            (AS_OF - datetime.timedelta(days=7), _lift(100)),
            (AS_OF, _lift(105)),
            (AS_OF + datetime.timedelta(days=1), _lift(500)),
        ]
        points = strength_progression(lifts, AS_OF, 7)
        assert [p.value for p in points] == [100, 105]

    def test_exercise_name(self):
        points = strength_progression([(JAN_1, _lift(100))], AS_OF, 90, "Back Squat")
        assert points[0].exercise_type_name == "Back Squat"
        assert points[0].metcon_type_name is None

    def test_unknown_exercise_still_returns_series(self):
        points = strength_progression([(JAN_1, _lift(100))], AS_OF, 90, None)
        assert points[0].exercise_type_name is None
        assert points[0].value == 100

    def test_off_grid_weight(self):
        points = strength_progression([(JAN_1, _lift(100.1))], AS_OF, 90)
        assert points[0].value == pytest.approx(100.1)

    def test_empty(self):
        assert strength_progression([], AS_OF, 90) == []

    def test_rejects_negative_period(self):
        with pytest.raises(InvalidArgumentError, match="period_days"):
            strength_progression([], AS_OF, -1)

    def test_idempotent(self):
        lifts = [(JAN_1, _lift(185)), (JAN_3, _lift(205))]
        assert strength_progression(lifts, AS_OF, 90) == strength_progression(lifts, AS_OF, 90)


# ======================================================================
# Metcon
# ======================================================================


class TestMetconProgression:
    def test_lowest_time_wins(self):
        workouts = [(JAN_1, _metcon(12.5)), (JAN_1, _metcon(10.0)), (JAN_1, _metcon(11.25))]
        assert metcon_progression(workouts, AS_OF, 90)[0].value == 10.0

    def test_timed_workout_beats_untimed(self):
        workouts = [(JAN_1, _metcon(rounds=8)), (JAN_1, _metcon(15.0))]
        assert metcon_progression(workouts, AS_OF, 90)[0].value == 15.0

    def test_falls_back_to_rounds(self):
        workouts = [(JAN_1, _metcon(rounds=7))]
        assert metcon_progression(workouts, AS_OF, 90)[0].value == 7

    def test_untimed_tie_keeps_first(self):
        workouts = [(JAN_1, _metcon(rounds=5)), (JAN_1, _metcon(rounds=9))]
        assert metcon_progression(workouts, AS_OF, 90)[0].value == 5

    def test_no_score_is_zero(self):
        assert metcon_progression([(JAN_1, _metcon())], AS_OF, 90)[0].value == 0

    def test_one_point_per_day_sorted(self):
        workouts = [(JAN_3, _metcon(9.0)), (JAN_1, _metcon(10.0)), (JAN_3, _metcon(8.5))]
        points = metcon_progression(workouts, AS_OF, 90, "For Time")
        assert [(p.date, p.value) for p in points] == [(JAN_1, 10.0), (JAN_3, 8.5)]
        assert all(p.metcon_type_name == "For Time" for p in points)
        assert all(p.exercise_type_name is None for p in points)

    def test_window(self):
        workouts = [(AS_OF - datetime.timedelta(days=91), _metcon(5.0))]
        assert metcon_progression(workouts, AS_OF, 90) == []


# ======================================================================
# Strength chart
# ======================================================================


def _session_lift(session_id: int, weight: float, sets: int | None = 3, reps: int | None = 5,
                  structure: SetStructure = SetStructure.SETS_REPS) -> StrengthLift:
    return StrengthLift(workout_session_id=session_id, exercise_type_id=1, set_structure=structure.value, sets=sets,
                        reps=reps, weight=weight)


class TestStrengthChart:
    LIFTS = [
        (JAN_3, _session_lift(2, 200, sets=1, reps=3)),
        (JAN_1, _session_lift(1, 185, sets=5, reps=5)),
        (JAN_1, _session_lift(1, 205, sets=1, reps=2)),
        (JAN_1, _session_lift(1, 300, structure=SetStructure.AMRAP)),
    ]

    def test_weight_lists_every_lift(self):
        points = strength_chart(self.LIFTS, AS_OF, 90, "weight")
        assert [(p.date, p.value, p.sets, p.reps, p.workout_session_id) for p in points] == [
            (JAN_1, 185, 5, 5, 1),
            (JAN_1, 205, 1, 2, 1),
            (JAN_3, 200, 1, 3, 2),
        ]

    def test_max_weight_per_day(self):
        points = strength_chart(self.LIFTS, AS_OF, 90, "maxWeight")
        assert [(p.date, p.value, p.sets, p.reps) for p in points] == [(JAN_1, 205, 1, 2), (JAN_3, 200, 1, 3)]

    def test_volume_per_day(self):
        points = strength_chart(self.LIFTS, AS_OF, 90, "volume")
        assert [(p.date, p.value, p.sets, p.reps) for p in points] == [
            (JAN_1, 185 * 25 + 205 * 2, 6, None),
            (JAN_3, 600, 1, None),
        ]
        assert points[0].workout_session_id == 1

    def test_metric_is_case_insensitive(self):
        assert strength_chart(self.LIFTS, AS_OF, 90, "MAXWEIGHT") == strength_chart(self.LIFTS, AS_OF, 90, "maxWeight")

    def test_window(self):
        lifts = [(AS_OF + datetime.timedelta(days=1), _session_lift(3, 500)), (AS_OF, _session_lift(2, 100))]
        assert [p.value for p in strength_chart(lifts, AS_OF, 7)] == [100]

    def test_unknown_metric(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            strength_chart(self.LIFTS, AS_OF, 90, "reps")
        assert exc_info.value.parameter == "metric"

    def test_empty(self):
        assert strength_chart([], AS_OF, 90, "volume") == []
