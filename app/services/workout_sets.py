"""Reconcile client-submitted workout state with the sets table.

The client sends every exercise in a workout with its sets. The first set of
an exercise already exists (it is created when the exercise is attached), so
it is updated in place; any later set is new on the client and is appended.
Each write commits on its own, so a failure part-way leaves the earlier writes
in place and the error goes back to the caller unchanged.
"""
from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy.orm import Session

from app.models import ExerciseSet
from app.repositories.set_repo import SetRepository
from app.repositories.workout_repo import WorkoutRepository
from app.schemas.workout import ExerciseSets, WorkoutDetail, WorkoutExercise
from app.schemas.exercise_set import SetRead

log = logging.getLogger(__name__)

FIRST_SET = 1

def upsert_workout_sets(
    db: Session,
    workout_id: int,
    exercises: Iterable[ExerciseSets],
    *,
    workout_name: str | None = None,
) -> list[ExerciseSet]:
    sets = SetRepository(db)
    affected: list[ExerciseSet] = []

    for exercise in exercises:
        for entry in exercise.sets:
            if entry.set_order == FIRST_SET:
                updated = sets.update_first_set(
                    workout_id, exercise.exercise_id, reps=entry.reps, weight=entry.weight
                )
                if updated:
                    affected.extend(updated)
                    continue
                log.warning(
                    "workout %s exercise %s had no first set; inserting it",
                    workout_id, exercise.exercise_id,
                )
            affected.append(
                sets.add_set(
                    workout_id,
                    exercise.exercise_id,
                    set_order=entry.set_order,
                    reps=entry.reps,
                    weight=entry.weight,
                )
            )

    if workout_name:
        WorkoutRepository(db).rename(workout_id, workout_name=workout_name)

    log.info("workout %s: %d set rows written", workout_id, len(affected))
    return affected

def build_workout_detail(db: Session, workout) -> WorkoutDetail:
    """Group the workout's sets by exercise, keeping each set's real values."""
    groups: dict[int, WorkoutExercise] = {}
    for s, exercise in WorkoutRepository(db).list_set_rows(workout.workout_id):
        group = groups.get(s.exercise_id)
        if group is None:
            group = groups[s.exercise_id] = WorkoutExercise(
                exercise_id=exercise.exercise_id,
                name=exercise.name,
                muscle_group=exercise.muscle_group,
                equipment=exercise.equipment,
                sets=[],
            )
        group.sets.append(SetRead(set_order=s.set_order, reps=s.reps, weight=s.weight))

    for group in groups.values():
        # stable: equal set_orders keep insertion order
        group.sets.sort(key=lambda x: x.set_order)

    return WorkoutDetail(
        workout_id=workout.workout_id,
        workout_name=workout.workout_name,
        completed_at=workout.completed_at,
        exercises=list(groups.values()),
    )
