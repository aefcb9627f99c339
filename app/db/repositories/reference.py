"""
Reference data repositories (exercise and metcon types).
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.reference import ExerciseType, MetconType


class ExerciseTypeRepository:
    """Repository for ExerciseType lookups."""

    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> list[ExerciseType]:
        statement = select(ExerciseType).order_by(ExerciseType.id)
        return list(self.session.exec(statement).all())

    def get_by_id(self, exercise_type_id: int) -> Optional[ExerciseType]:
        return self.session.get(ExerciseType, exercise_type_id)


class MetconTypeRepository:
    """Repository for MetconType lookups."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, metcon_type_id: int) -> Optional[MetconType]:
        return self.session.get(MetconType, metcon_type_id)
