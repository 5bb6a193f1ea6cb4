from __future__ import annotations
from typing import Iterable
from sqlalchemy import update, delete, insert
from app.models import ExerciseSet
from app.repositories.base import BaseRepository

class SetRepository(BaseRepository):
    def attach_exercises(self, workout_id: int, exercise_ids: Iterable[int]) -> list[ExerciseSet]:
        """One multi-row INSERT of unfilled first sets; all rows land or none do."""
        rows = [{"workout_id": workout_id, "exercise_id": eid, "set_order": 1} for eid in exercise_ids]
        with self.write():
            created = list(self.db.scalars(insert(ExerciseSet).returning(ExerciseSet), rows).all())
        return created

    def update_first_set(self, workout_id: int, exercise_id: int, *, reps: int | None, weight: float | None) -> list[ExerciseSet]:
        stmt = (
            update(ExerciseSet)
            .where(
                ExerciseSet.workout_id == workout_id,
                ExerciseSet.exercise_id == exercise_id,
                ExerciseSet.set_order == 1,
            )
            .values(reps=reps, weight=weight)
            .returning(ExerciseSet)
        )
        with self.write():
            updated = list(self.db.scalars(stmt).all())
        return updated

    def add_set(self, workout_id: int, exercise_id: int, *, set_order: int, reps: int | None, weight: float | None) -> ExerciseSet:
        s = ExerciseSet(workout_id=workout_id, exercise_id=exercise_id, set_order=set_order, reps=reps, weight=weight)
        return self.add_and_refresh(s)

    def replace_exercise(self, workout_id: int, exercise_id: int, *, new_exercise_id: int) -> list[ExerciseSet]:
        stmt = (
            update(ExerciseSet)
            .where(ExerciseSet.workout_id == workout_id, ExerciseSet.exercise_id == exercise_id)
            .values(exercise_id=new_exercise_id)
            .returning(ExerciseSet)
        )
        with self.write():
            replaced = list(self.db.scalars(stmt).all())
        return replaced

    def delete_exercise(self, workout_id: int, exercise_id: int) -> int:
        with self.write():
            result = self.db.execute(
                delete(ExerciseSet)
                .where(ExerciseSet.workout_id == workout_id, ExerciseSet.exercise_id == exercise_id)
                .execution_options(synchronize_session=False)
            )
        return result.rowcount
