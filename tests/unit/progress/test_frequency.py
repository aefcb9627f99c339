"""Tests for workout frequency, gap-tolerant streaks and the frequency chart.

Pure unit tests: sessions are built in memory, no database involved.
"""

import datetime

import pytest

from app.core.exceptions import InvalidArgumentError
from app.models.metcon_workout import MetconWorkout
from app.models.strength_lift import StrengthLift
from app.models.workout_session import WorkoutSession
from app.progress.frequency import (
    average_per_week,
    current_streak,
    frequency_chart,
    longest_streak,
    workout_frequency,
)

D = datetime.date(2024, 3, 15)


def _days_before(*offsets: int) -> list[datetime.date]:
    return [D - datetime.timedelta(days=n) for n in offsets]


def _sessions(*dates: datetime.date) -> list[WorkoutSession]:
    return [WorkoutSession(id=i, user_id=1, date=d) for i, d in enumerate(dates, start=1)]


# ======================================================================
# current_streak
# ======================================================================


class TestCurrentStreak:
    def test_empty(self):
        assert current_streak([], D) == 0

    def test_single_session_today(self):
        assert current_streak(_days_before(0), D) == 1

    def test_every_other_day(self):
        assert current_streak(_days_before(0, 2, 4), D) == 3

    def test_single_missed_day_inside_run_is_tolerated(self):
        # D-2 is a rest day, D-3 keeps the streak alive
        assert current_streak(_days_before(0, 1, 3), D) == 3

    def test_two_missed_days_end_the_streak(self):
        assert current_streak(_days_before(0, 1, 4), D) == 2

    def test_rest_day_today(self):
        assert current_streak(_days_before(1, 2), D) == 2

    def test_last_session_two_days_ago(self):
        assert current_streak(_days_before(2, 3, 4), D) == 0

    def test_several_separate_rest_days(self):
        assert current_streak(_days_before(0, 2, 3, 5), D) == 4

    def test_counts_session_days_not_calendar_days(self):
        # Five sessions spread over nine calendar days
        assert current_streak(_days_before(0, 2, 4, 6, 8), D) == 5

    def test_duplicate_dates_count_once(self):
        assert current_streak(_days_before(0, 0, 1), D) == 2

    def test_future_sessions_are_ignored(self):
        assert current_streak([D + datetime.timedelta(days=1), D], D) == 1


# ======================================================================
# longest_streak
# ======================================================================


class TestLongestStreak:
    def test_empty(self):
        assert longest_streak([]) == 0

    def test_single_session(self):
        assert longest_streak(_days_before(40)) == 1

    def test_every_other_day(self):
        assert longest_streak(_days_before(0, 2, 4)) == 3

    def test_gap_of_two_days_continues(self):
        assert longest_streak(_days_before(0, 1, 3)) == 3

    def test_gap_of_three_days_resets(self):
        assert longest_streak(_days_before(0, 1, 4)) == 2

    def test_unordered_input(self):
        assert longest_streak(_days_before(4, 0, 2)) == 3

    def test_keeps_the_longest_run(self):
        dates = _days_before(20, 19, 18, 17, 10, 9, 0)
        assert longest_streak(dates) == 4

    def test_last_run_is_longest(self):
        dates = _days_before(30, 10, 9, 8)
        assert longest_streak(dates) == 3


# ======================================================================
# average_per_week
# ======================================================================


class TestAveragePerWeek:
    @pytest.mark.parametrize(
        "total, span, expected",
        [
            (0, 30, 0.0),
            (3, 30, 0.7),
            (12, 28, 3.0),
            (30, 30, 7.0),
            (5, 0, 0.0),
        ],
    )
    def test_rounding(self, total, span, expected):
        assert average_per_week(total, span) == expected


# ======================================================================
# workout_frequency
# ======================================================================


class TestWorkoutFrequency:
    def test_empty(self):
        stats = workout_frequency([], D, 30)
        assert stats.total_workouts == 0
        assert stats.total_days == 30
        assert stats.average_workouts_per_week == 0.0
        assert stats.current_streak == 0
        assert stats.longest_streak == 0

    def test_every_other_day(self):
        stats = workout_frequency(_sessions(*_days_before(0, 2, 4)), D, 30)
        assert stats.total_workouts == 3
        assert stats.average_workouts_per_week == 0.7
        assert stats.current_streak == 3
        assert stats.longest_streak == 3

    def test_window_is_inclusive(self):
        stats = workout_frequency(_sessions(*_days_before(30, 31)), D, 30)
        assert stats.total_workouts == 1

    def test_longest_streak_uses_window_only(self):
        sessions = _sessions(*_days_before(0, 40, 41, 42, 43))
        stats = workout_frequency(sessions, D, 30)
        assert stats.longest_streak == 1

    @pytest.mark.parametrize("period_days", [0, -7])
    def test_rejects_non_positive_period(self, period_days):
        with pytest.raises(InvalidArgumentError) as exc_info:
            workout_frequency([], D, period_days)
        assert exc_info.value.parameter == "period_days"

    def test_idempotent(self):
        sessions = _sessions(*_days_before(0, 1, 3, 9))
        assert workout_frequency(sessions, D, 30) == workout_frequency(sessions, D, 30)


# ======================================================================
# frequency_chart
# ======================================================================


class TestFrequencyChart:
    AS_OF = datetime.date(2024, 3, 18)  # a Monday

    def test_group_by_week_starts_on_monday(self):
        sessions = _sessions(datetime.date(2024, 3, 11), datetime.date(2024, 3, 13), datetime.date(2024, 3, 18))
        buckets = frequency_chart(sessions, self.AS_OF, 90, "week")
        assert [(b.period_start, b.workouts) for b in buckets] == [
            (datetime.date(2024, 3, 11), 2),
            (datetime.date(2024, 3, 18), 1),
        ]

    def test_group_by_month(self):
        sessions = _sessions(datetime.date(2024, 3, 1), datetime.date(2024, 2, 28), datetime.date(2024, 2, 3))
        buckets = frequency_chart(sessions, self.AS_OF, 90, "month")
        assert [(b.period_start, b.workouts) for b in buckets] == [
            (datetime.date(2024, 2, 1), 2),
            (datetime.date(2024, 3, 1), 1),
        ]

    def test_group_by_day_is_case_insensitive(self):
        sessions = _sessions(datetime.date(2024, 3, 17), datetime.date(2024, 3, 15))
        buckets = frequency_chart(sessions, self.AS_OF, 90, "Day")
        assert [b.period_start for b in buckets] == [datetime.date(2024, 3, 15), datetime.date(2024, 3, 17)]

    def test_sessions_outside_window_are_dropped(self):
        sessions = _sessions(datetime.date(2023, 1, 2), datetime.date(2024, 3, 18))
        buckets = frequency_chart(sessions, self.AS_OF, 30, "day")
        assert len(buckets) == 1

    def test_empty(self):
        assert frequency_chart([], self.AS_OF, 90) == []

    def test_unknown_group_by(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            frequency_chart([], self.AS_OF, 90, "year")
        assert exc_info.value.parameter == "group_by"

    def test_counts_lifts_and_metcons_per_bucket(self):
        mon, wed, next_mon = datetime.date(2024, 3, 11), datetime.date(2024, 3, 13), datetime.date(2024, 3, 18)
        lift = StrengthLift(workout_session_id=1, exercise_type_id=1, set_structure="EMOM", weight=50)
        metcon = MetconWorkout(workout_session_id=1, metcon_type_id=1, total_time=10)
        lifts = [(mon, lift), (wed, lift), (wed, lift), (datetime.date(2023, 1, 2), lift)]
        buckets = frequency_chart(_sessions(mon, wed, next_mon), self.AS_OF, 90, "week", strength_lifts=lifts,
                                  metcon_workouts=[(next_mon, metcon)])
        assert [(b.period_start, b.workouts, b.strength_lifts, b.metcon_workouts) for b in buckets] == [
            (mon, 2, 3, 0),
            (next_mon, 1, 0, 1),
        ]

    def test_counts_default_to_zero(self):
        bucket = frequency_chart(_sessions(self.AS_OF), self.AS_OF, 90, "day")[0]
        assert (bucket.strength_lifts, bucket.metcon_workouts) == (0, 0)
