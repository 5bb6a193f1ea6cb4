# app/deps/auth.py
from typing import Annotated

from fastapi import Depends, HTTPException, Path, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose.exceptions import ExpiredSignatureError, JWTError

from app.db import get_db
from app.models import User, Workout
from app.repositories.workout_repo import WorkoutRepository
from app.schemas.base import INT32_MAX
from app.security import decode_token

# Exposes Bearer auth in Swagger; sign-in issues the token
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/sign-in")

def get_current_user(
    db: Session = Depends(get_db),
    token: str = Depends(oauth2_scheme),
) -> User:
    unauth = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_token(token)
        sub = payload.get("sub")
        if sub is None:
            raise unauth
        user = db.get(User, int(sub))
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except (JWTError, ValueError):
        raise unauth

    if not user:
        raise unauth
    return user

def load_owned_workout(db: Session, workout_id: int, current: User) -> Workout:
    """404 if the workout is missing, 403 if it belongs to someone else."""
    workout = WorkoutRepository(db).get(workout_id)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    if workout.user_id != current.user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed for this workout")
    return workout

def get_owned_workout(
    workout_id: Annotated[int, Path(ge=1, le=INT32_MAX)],
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
) -> Workout:
    """
    Usage: workout: Workout = Depends(get_owned_workout) on routes with a {workout_id} path param.
    """
    return load_owned_workout(db, workout_id, current)
