from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import select, update, delete
from app.models import Workout, Exercise, ExerciseSet
from app.repositories.base import BaseRepository

class WorkoutRepository(BaseRepository):
    def get(self, workout_id: int) -> Optional[Workout]:
        return self.db.get(Workout, workout_id)

    def list_completed_by_user(self, user_id: int) -> list[Workout]:
        stmt = select(Workout).where(Workout.user_id == user_id, Workout.completed_at.is_not(None))\
                              .order_by(Workout.completed_at.desc(), Workout.workout_id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def list_set_rows(self, workout_id: int):
        """Sets joined with their exercise, oldest row first."""
        stmt = (
            select(ExerciseSet, Exercise)
            .join(Exercise, Exercise.exercise_id == ExerciseSet.exercise_id)
            .where(ExerciseSet.workout_id == workout_id)
            .order_by(ExerciseSet.set_id.asc())
        )
        return self.db.execute(stmt).all()

    def create(self, user_id: int, *, workout_name: str | None) -> Workout:
        return self.add_and_refresh(Workout(user_id=user_id, workout_name=workout_name))

    def rename(self, workout_id: int, *, workout_name: str) -> None:
        with self.write():
            self.db.execute(
                update(Workout).where(Workout.workout_id == workout_id).values(workout_name=workout_name)
            )

    def complete(self, workout_id: int, *, workout_name: str | None) -> None:
        # Re-completing just moves the timestamp; nothing ever clears it
        with self.write():
            self.db.execute(
                update(Workout)
                .where(Workout.workout_id == workout_id)
                .values(completed_at=datetime.now(timezone.utc), workout_name=workout_name)
            )

    def delete_in_progress(self, user_id: int) -> int:
        """Delete the user's unfinished workouts; their sets go with them via ON DELETE CASCADE."""
        with self.write():
            result = self.db.execute(
                delete(Workout)
                .where(Workout.user_id == user_id, Workout.completed_at.is_(None))
                .execution_options(synchronize_session=False)
            )
        return result.rowcount
