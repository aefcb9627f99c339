"""
Progress analytics service.

Loads a user's sessions, lifts and metcon workouts through the
repositories and hands the materialized rows to the pure functions in
:mod:`app.progress`.  The service holds no state beyond its database
session, so one instance per request is the norm.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from app.db.repositories.metcon_workout import MetconWorkoutRepository
from app.db.repositories.reference import ExerciseTypeRepository, MetconTypeRepository
from app.db.repositories.strength_lift import StrengthLiftRepository
from app.db.repositories.workout_session import WorkoutSessionRepository
from app.progress import frequency, progression, records, summary
from app.progress.config import DEFAULT_CONFIG, ProgressConfig, window
from app.schemas.progress import (Achievement, DashboardSummary, FrequencyBucket, PersonalRecord, ProgressDataPoint,
                                  ProgressOverview, StrengthChartPoint, VolumeDataPoint, VolumeTrendPoint,
                                  WorkoutFrequencyStats, )

logger = logging.getLogger(__name__)


class ProgressService:
    """Service for progress tracking and analytics."""

    def __init__(self, session: Session, config: Optional[ProgressConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.sessions = WorkoutSessionRepository(session)
        self.lifts = StrengthLiftRepository(session)
        self.metcons = MetconWorkoutRepository(session)
        self.exercise_types = ExerciseTypeRepository(session)
        self.metcon_types = MetconTypeRepository(session)

    def get_strength_progression(self, user_id: int, exercise_type_id: int, period_days: Optional[int] = None,
                                 as_of: Optional[datetime.date] = None, ) -> list[ProgressDataPoint]:
        period_days = period_days if period_days is not None else self.config.progression_days
        as_of = as_of or datetime.date.today()
        logger.debug("Getting strength progression for user %s, exercise %s, period %s days",
                     user_id, exercise_type_id, period_days)

        lifts = self.lifts.get_by_user_and_exercise_type(user_id, exercise_type_id)
        exercise_type = self.exercise_types.get_by_id(exercise_type_id)
        points = progression.strength_progression(lifts, as_of, period_days,
                                                  exercise_type.name if exercise_type else None)

        logger.debug("Found %d strength progression points for user %s, exercise %s",
                     len(points), user_id, exercise_type_id)
        return points

    def get_strength_chart(self, user_id: int, exercise_type_id: int, period_days: Optional[int] = None,
                           metric: str = "weight", as_of: Optional[datetime.date] = None, ) -> list[StrengthChartPoint]:
        period_days = period_days if period_days is not None else self.config.progression_days
        as_of = as_of or datetime.date.today()
        logger.debug("Getting strength chart for user %s, exercise %s, period %s days, metric %s",
                     user_id, exercise_type_id, period_days, metric)

        points = progression.strength_chart(self.lifts.get_by_user_and_exercise_type(user_id, exercise_type_id),
                                            as_of, period_days, metric)

        logger.debug("Found %d strength chart points for user %s, exercise %s", len(points), user_id,
                     exercise_type_id)
        return points

    def get_metcon_progression(self, user_id: int, metcon_type_id: int, period_days: Optional[int] = None,
                               as_of: Optional[datetime.date] = None, ) -> list[ProgressDataPoint]:
        period_days = period_days if period_days is not None else self.config.progression_days
        as_of = as_of or datetime.date.today()
        logger.debug("Getting metcon progression for user %s, metcon type %s, period %s days",
                     user_id, metcon_type_id, period_days)

        workouts = self.metcons.get_by_user_and_metcon_type(user_id, metcon_type_id)
        metcon_type = self.metcon_types.get_by_id(metcon_type_id)
        points = progression.metcon_progression(workouts, as_of, period_days,
                                                metcon_type.name if metcon_type else None)

        logger.debug("Found %d metcon progression points for user %s, metcon type %s",
                     len(points), user_id, metcon_type_id)
        return points

    def get_workout_frequency(self, user_id: int, period_days: Optional[int] = None,
                              as_of: Optional[datetime.date] = None, ) -> WorkoutFrequencyStats:
        period_days = period_days if period_days is not None else self.config.frequency_days
        as_of = as_of or datetime.date.today()
        logger.debug("Getting workout frequency for user %s, period %s days", user_id, period_days)

        start, end = window(as_of, period_days)
        sessions = self.sessions.get_by_user_date_range(user_id, start, end)
        stats = frequency.workout_frequency(sessions, as_of, period_days)

        logger.debug("User %s: %d workouts, current streak %d", user_id, stats.total_workouts,
                     stats.current_streak)
        return stats

    def get_frequency_chart(self, user_id: int, period_days: Optional[int] = None, group_by: str = "week",
                            as_of: Optional[datetime.date] = None, ) -> list[FrequencyBucket]:
        period_days = period_days if period_days is not None else self.config.frequency_chart_days
        as_of = as_of or datetime.date.today()
        logger.debug("Getting frequency chart for user %s, period %s days, grouped by %s",
                     user_id, period_days, group_by)

        start, end = window(as_of, period_days)
        return frequency.frequency_chart(self.sessions.get_by_user_date_range(user_id, start, end), as_of,
                                         period_days, group_by,
                                         strength_lifts=self.lifts.get_by_user_date_range(user_id, start, end),
                                         metcon_workouts=self.metcons.get_by_user_date_range(user_id, start, end), )

    def get_personal_records(self, user_id: int, exercise_type_ids: Optional[list[int]] = None,
                             limit: Optional[int] = None,
                             as_of: Optional[datetime.date] = None, ) -> list[PersonalRecord]:
        as_of = as_of or datetime.date.today()
        logger.debug("Getting personal records for user %s, exercise types %s, limit %s",
                     user_id, exercise_type_ids or "all", limit)

        found = records.personal_records(self.lifts.get_by_user(user_id), self.exercise_types.get_all(), as_of,
                                         self.config.achievement_days, exercise_type_ids, limit, )

        logger.debug("Found %d personal records for user %s", len(found), user_id)
        return found

    def get_volume_stats(self, user_id: int, period_days: Optional[int] = None,
                         as_of: Optional[datetime.date] = None, ) -> list[VolumeDataPoint]:
        period_days = period_days if period_days is not None else self.config.volume_days
        as_of = as_of or datetime.date.today()
        logger.debug("Getting volume stats for user %s, period %s days", user_id, period_days)

        start, end = window(as_of, period_days)
        points = records.volume_series(self.lifts.get_by_user_date_range(user_id, start, end), as_of, period_days)

        logger.debug("Found %d volume points for user %s", len(points), user_id)
        return points

    def get_volume_trends(self, user_id: int, period_days: Optional[int] = None,
                          exercise_type_ids: Optional[list[int]] = None,
                          as_of: Optional[datetime.date] = None, ) -> list[VolumeTrendPoint]:
        period_days = period_days if period_days is not None else self.config.volume_trend_days
        as_of = as_of or datetime.date.today()
        logger.debug("Getting volume trends for user %s, period %s days, exercise types %s",
                     user_id, period_days, exercise_type_ids or "all")

        start, end = window(as_of, period_days)
        trends = records.volume_trends(self.lifts.get_by_user_date_range(user_id, start, end),
                                       self.exercise_types.get_all(), as_of, period_days, exercise_type_ids)

        logger.debug("Found %d volume trend points for user %s", len(trends), user_id)
        return trends

    def get_dashboard_summary(self, user_id: int, as_of: Optional[datetime.date] = None) -> DashboardSummary:
        as_of = as_of or datetime.date.today()
        logger.debug("Getting dashboard summary for user %s", user_id)

        return summary.dashboard_summary(self.sessions.get_by_user(user_id), self.lifts.get_by_user(user_id),
                                         self.exercise_types.get_all(), as_of, self.config.dashboard_days, )

    def get_recent_achievements(self, user_id: int, limit: Optional[int] = None,
                                as_of: Optional[datetime.date] = None,
                                days: Optional[int] = None, ) -> list[Achievement]:
        limit = limit if limit is not None else self.config.achievement_limit
        days = days if days is not None else self.config.achievement_days
        as_of = as_of or datetime.date.today()
        logger.debug("Getting recent achievements for user %s, last %s days, limit %s", user_id, days, limit)

        achievements = summary.recent_achievements(self.get_personal_records(user_id, as_of=as_of), as_of, limit,
                                                   days, )

        logger.debug("Found %d recent achievements for user %s", len(achievements), user_id)
        return achievements

    def get_overview(self, user_id: int, as_of: Optional[datetime.date] = None) -> ProgressOverview:
        as_of = as_of or datetime.date.today()
        logger.debug("Getting progress overview for user %s", user_id)

        return summary.progress_overview(self.sessions.get_by_user(user_id), len(self.lifts.get_by_user(user_id)),
                                         len(self.metcons.get_by_user(user_id)), as_of, )
