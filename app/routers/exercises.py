from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.exercise import ExerciseRead
from app.repositories.exercise_repo import ExerciseRepository
from app.deps.auth import get_current_user

router = APIRouter(prefix="/api", tags=["exercises"], dependencies=[Depends(get_current_user)])

@router.get("/all-exercises", response_model=list[ExerciseRead])
def all_exercises(db: Session = Depends(get_db)):
    return ExerciseRepository(db).list_all()
