"""
Reference data models.

Exercise and metcon types are seeded lookups; analytics only use
them to put display names on results.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class ExerciseType(SQLModel, table=True):
    __tablename__ = "exercise_types"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=100, index=True)
    category: str = Field(default="", nullable=False, max_length=50)
    is_active: bool = Field(default=True)


class MetconType(SQLModel, table=True):
    __tablename__ = "metcon_types"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=50, index=True)
    description: Optional[str] = Field(default=None, max_length=200)
    is_active: bool = Field(default=True)
