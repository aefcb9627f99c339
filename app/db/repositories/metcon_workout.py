"""
Metcon workout repository.

Returns ``(date, workout)`` pairs joined on the parent session.
"""

import datetime

from sqlmodel import Session, select

from app.models.metcon_workout import MetconWorkout
from app.models.workout_session import WorkoutSession

DatedWorkout = tuple[datetime.date, MetconWorkout]


class MetconWorkoutRepository:
    """Repository for MetconWorkout database operations."""

    def __init__(self, session: Session):
        self.session = session

    def _dated(self, *criteria) -> list[DatedWorkout]:
        statement = (select(MetconWorkout, WorkoutSession.date)
                     .join(WorkoutSession, MetconWorkout.workout_session_id == WorkoutSession.id)
                     .where(*criteria)
                     .order_by(WorkoutSession.date, MetconWorkout.order, MetconWorkout.id))
        return [(date, workout) for workout, date in self.session.exec(statement).all()]

    def get_by_user(self, user_id: int) -> list[DatedWorkout]:
        return self._dated(WorkoutSession.user_id == user_id)

    def get_by_user_and_metcon_type(self, user_id: int, metcon_type_id: int) -> list[DatedWorkout]:
        return self._dated(WorkoutSession.user_id == user_id, MetconWorkout.metcon_type_id == metcon_type_id)

    def get_by_user_date_range(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[DatedWorkout]:
        return self._dated(WorkoutSession.user_id == user_id, WorkoutSession.date >= start,
                           WorkoutSession.date <= end)
