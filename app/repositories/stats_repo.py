from __future__ import annotations
from sqlalchemy import select, func
from app.models import Workout, Exercise, ExerciseSet
from app.repositories.base import BaseRepository

class StatsRepository(BaseRepository):
    def best_sets(self, user_id: int) -> list[dict]:
        """
        One row per (workout, exercise) of the user: the filled set with the
        highest reps * weight, plus how many filled sets that pair has.

        Ties on volume go to the lowest set_order, then the oldest row.
        """
        volume = ExerciseSet.reps * ExerciseSet.weight
        partition = (ExerciseSet.workout_id, ExerciseSet.exercise_id)
        ranked = (
            select(
                ExerciseSet.workout_id,
                ExerciseSet.exercise_id,
                ExerciseSet.reps,
                ExerciseSet.weight,
                volume.label("volume"),
                func.row_number().over(
                    partition_by=partition,
                    order_by=(volume.desc(), ExerciseSet.set_order.asc(), ExerciseSet.set_id.asc()),
                ).label("volume_rank"),
                func.count().over(partition_by=partition).label("total_sets"),
            )
            .join(Workout, Workout.workout_id == ExerciseSet.workout_id)
            .where(
                Workout.user_id == user_id,
                ExerciseSet.reps.is_not(None),
                ExerciseSet.weight.is_not(None),
            )
            .subquery()
        )
        stmt = (
            select(
                Exercise.exercise_id,
                Exercise.name,
                Exercise.muscle_group,
                Exercise.equipment,
                ranked.c.reps,
                ranked.c.weight,
                ranked.c.volume,
                ranked.c.total_sets,
                Workout.workout_id,
                Workout.workout_name,
                Workout.completed_at,
            )
            .select_from(ranked)
            .join(Exercise, Exercise.exercise_id == ranked.c.exercise_id)
            .join(Workout, Workout.workout_id == ranked.c.workout_id)
            .where(ranked.c.volume_rank == 1)
            .order_by(Exercise.name.asc(), Workout.workout_id.asc())
        )
        return [dict(row) for row in self.db.execute(stmt).mappings().all()]
