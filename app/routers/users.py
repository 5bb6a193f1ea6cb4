from __future__ import annotations
import logging
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.models import User
from app.repositories.user_repo import UserRepository
from app.repositories.workout_repo import WorkoutRepository
from app.repositories.stats_repo import StatsRepository
from app.schemas.workout import WorkoutRead
from app.schemas.stats import BestSetRead
from app.deps.auth import get_current_user

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])

@router.get("/all-usernames", response_model=list[str])
def all_usernames(db: Session = Depends(get_db)):
    return UserRepository(db).list_usernames()

@router.get("/user/all-workouts", response_model=list[WorkoutRead])
def completed_workouts(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutRepository(db).list_completed_by_user(current.user_id)

@router.delete("/user/empty-workouts", status_code=status.HTTP_204_NO_CONTENT)
def purge_empty_workouts(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    purged = WorkoutRepository(db).delete_in_progress(current.user_id)
    log.info("user %s: purged %d unfinished workouts", current.user_id, purged)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/user/workout-sets", response_model=list[BestSetRead])
def best_sets(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return StatsRepository(db).best_sets(current.user_id)
