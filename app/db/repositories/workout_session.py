"""
Workout session repository.

Read access to :class:`WorkoutSession` rows for analytics.
"""

import datetime

from sqlmodel import Session, select

from app.models.workout_session import WorkoutSession


class WorkoutSessionRepository:
    """Repository for WorkoutSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user(self, user_id: int) -> list[WorkoutSession]:
        statement = (select(WorkoutSession).where(WorkoutSession.user_id == user_id)
                     .order_by(WorkoutSession.date))
        return list(self.session.exec(statement).all())

    def get_by_user_date_range(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[WorkoutSession]:
        """Get sessions for a user within a date range (inclusive)."""
        statement = (select(WorkoutSession).where(WorkoutSession.user_id == user_id, WorkoutSession.date >= start,
                                                  WorkoutSession.date <= end, ).order_by(WorkoutSession.date))
        return list(self.session.exec(statement).all())
