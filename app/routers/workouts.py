import logging
from typing import Annotated
from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.models import User, Workout
from app.schemas.workout import (
    WorkoutCreate,
    WorkoutRead,
    WorkoutDetail,
    ExercisesAttach,
    WorkoutSetsUpdate,
    WorkoutComplete,
    ExerciseSwap,
)
from app.schemas.exercise_set import SetRow
from app.schemas.base import INT32_MAX
from app.repositories.workout_repo import WorkoutRepository
from app.repositories.set_repo import SetRepository
from app.services.workout_sets import upsert_workout_sets, build_workout_detail
from app.deps.auth import get_current_user, get_owned_workout, load_owned_workout

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["workouts"])

ExerciseId = Annotated[int, Path(ge=1, le=INT32_MAX)]

@router.post("/new-workout", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(payload: WorkoutCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    workout = WorkoutRepository(db).create(current.user_id, workout_name=payload.workout_name)
    log.info("user %s created workout %s", current.user_id, workout.workout_id)
    return workout

@router.post("/workout/new-exercises", response_model=list[SetRow], status_code=status.HTTP_201_CREATED)
def attach_exercises(payload: ExercisesAttach, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    workout = load_owned_workout(db, payload.workout_id, current)
    return SetRepository(db).attach_exercises(workout.workout_id, payload.exercise_ids)

@router.get("/workout/{workout_id}", response_model=WorkoutDetail)
def workout_detail(workout: Workout = Depends(get_owned_workout), db: Session = Depends(get_db)):
    return build_workout_detail(db, workout)

@router.patch("/workout/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_workout_sets(
    payload: WorkoutSetsUpdate,
    workout: Workout = Depends(get_owned_workout),
    db: Session = Depends(get_db),
):
    upsert_workout_sets(db, workout.workout_id, payload.exercises, workout_name=payload.workout_name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.patch("/workout/{workout_id}/completed", status_code=status.HTTP_204_NO_CONTENT)
def complete_workout(
    payload: WorkoutComplete,
    workout: Workout = Depends(get_owned_workout),
    db: Session = Depends(get_db),
):
    WorkoutRepository(db).complete(workout.workout_id, workout_name=payload.workout_name)
    log.info("workout %s completed", workout.workout_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.patch("/workout/{workout_id}/exercise/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
def swap_exercise(
    exercise_id: ExerciseId,
    payload: ExerciseSwap,
    workout: Workout = Depends(get_owned_workout),
    db: Session = Depends(get_db),
):
    SetRepository(db).replace_exercise(workout.workout_id, exercise_id, new_exercise_id=payload.new_exercise_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/workout/{workout_id}/exercise/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_exercise(
    exercise_id: ExerciseId,
    workout: Workout = Depends(get_owned_workout),
    db: Session = Depends(get_db),
):
    SetRepository(db).delete_exercise(workout.workout_id, exercise_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
