from __future__ import annotations
from sqlalchemy import select
from app.models import Exercise
from app.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository):
    def list_all(self) -> list[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc(), Exercise.exercise_id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def create(self, *, name: str, muscle_group: str, equipment: str | None = None) -> Exercise:
        """Catalogue maintenance (seeding, tests); no API route writes exercises."""
        return self.add_and_refresh(Exercise(name=name, muscle_group=muscle_group, equipment=equipment))
