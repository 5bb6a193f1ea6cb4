"""
Point the app at a throwaway SQLite file before anything imports app.db,
build the schema once per run and seed a small exercise catalogue.
"""
import os
import tempfile

_tmpdir = tempfile.mkdtemp(prefix="workout-tests-")
os.environ["DB_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'test.db')}"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest

from app.db import Base, SessionLocal, engine
from app import models  # noqa: F401
from app.repositories.exercise_repo import ExerciseRepository

CATALOGUE = [
    ("Bench Press", "Chest", "Barbell"),
    ("Back Squat", "Legs", "Barbell"),
    ("Deadlift", "Back", "Barbell"),
    ("Pull Up", "Back", None),
]

@pytest.fixture(scope="session", autouse=True)
def schema():
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)
    engine.dispose()

@pytest.fixture(scope="session")
def exercises(schema):
    """name -> exercise_id"""
    with SessionLocal() as db:
        repo = ExerciseRepository(db)
        return {name: repo.create(name=name, muscle_group=group, equipment=eq).exercise_id
                for name, group, eq in CATALOGUE}
