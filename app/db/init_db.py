"""
Database initialization.

Creates all tables and seeds the exercise and metcon type lookups.
"""

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, select

from app.db import base  # noqa: F401
from app.models.reference import ExerciseType, MetconType

EXERCISE_TYPES: list[tuple[str, str]] = [
    ("Back Squat", "Squat"), ("Front Squat", "Squat"), ("Overhead Squat", "Squat"), ("Box Squat", "Squat"),
    ("Goblet Squat", "Squat"),
    ("Deadlift", "Deadlift"), ("Sumo Deadlift", "Deadlift"), ("Romanian Deadlift", "Deadlift"),
    ("Stiff Leg Deadlift", "Deadlift"), ("Trap Bar Deadlift", "Deadlift"),
    ("Bench Press", "Press"), ("Overhead Press", "Press"), ("Incline Bench Press", "Press"),
    ("Dumbbell Press", "Press"), ("Push Press", "Press"), ("Jerk", "Press"),
    ("Clean", "Olympic"), ("Snatch", "Olympic"), ("Clean and Jerk", "Olympic"), ("Power Clean", "Olympic"),
    ("Power Snatch", "Olympic"),
    ("Bent Over Row", "Row"), ("T-Bar Row", "Row"), ("Seated Row", "Row"), ("Pendlay Row", "Row"),
    ("Pull-ups", "Accessory"), ("Chin-ups", "Accessory"), ("Dips", "Accessory"), ("Lunges", "Accessory"),
    ("Hip Thrust", "Accessory"),
]

METCON_TYPES: list[tuple[str, str]] = [
    ("AMRAP", "As Many Rounds As Possible within the time limit"),
    ("For Time", "Complete the prescribed work as fast as possible"),
    ("EMOM", "Every Minute On the Minute"),
    ("Tabata", "20 seconds of work, 10 seconds of rest, 8 rounds"),
    ("Chipper", "Work through a long list of movements in order"),
    ("Ladder", "Increase or decrease reps with each round"),
    ("Death By", "Add one rep every minute until failure"),
    ("Custom", "Custom workout format"),
]


def seed_reference_data(session: Session) -> None:
    """Insert the exercise and metcon type lookups if the tables are empty."""
    if session.exec(select(ExerciseType)).first() is None:
        session.add_all(ExerciseType(name=name, category=category) for name, category in EXERCISE_TYPES)
    if session.exec(select(MetconType)).first() is None:
        session.add_all(MetconType(name=name, description=description) for name, description in METCON_TYPES)
    session.commit()


def init_db(engine: Engine) -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables
    - Seeds reference data
    """
    print("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    print("✓ Tables created successfully")

    with Session(engine) as session:
        seed_reference_data(session)
    print("✓ Reference data seeded")

    print("Database initialization complete!")


if __name__ == "__main__":
    from app.db.session import engine as default_engine

    init_db(default_engine)
