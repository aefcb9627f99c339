"""
Strength lift repository.

Every query joins the parent :class:`WorkoutSession` explicitly and
returns ``(date, lift)`` pairs, so callers never navigate from a lift
back to its session.
"""

import datetime

from sqlmodel import Session, select

from app.models.strength_lift import StrengthLift
from app.models.workout_session import WorkoutSession

DatedLift = tuple[datetime.date, StrengthLift]


class StrengthLiftRepository:
    """Repository for StrengthLift database operations."""

    def __init__(self, session: Session):
        self.session = session

    def _dated(self, *criteria) -> list[DatedLift]:
        statement = (select(StrengthLift, WorkoutSession.date)
                     .join(WorkoutSession, StrengthLift.workout_session_id == WorkoutSession.id)
                     .where(*criteria)
                     .order_by(WorkoutSession.date, StrengthLift.order, StrengthLift.id))
        return [(date, lift) for lift, date in self.session.exec(statement).all()]

    def get_by_user(self, user_id: int) -> list[DatedLift]:
        return self._dated(WorkoutSession.user_id == user_id)

    def get_by_user_and_exercise_type(self, user_id: int, exercise_type_id: int) -> list[DatedLift]:
        return self._dated(WorkoutSession.user_id == user_id, StrengthLift.exercise_type_id == exercise_type_id)

    def get_by_user_date_range(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[DatedLift]:
        return self._dated(WorkoutSession.user_id == user_id, WorkoutSession.date >= start,
                           WorkoutSession.date <= end)
