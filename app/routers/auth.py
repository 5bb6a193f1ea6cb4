from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.user import UserCredentials, UserRead, SignInResponse
from app.security import hash_password, verify_password, create_access_token
from app.repositories.user_repo import UserRepository

router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.post("/sign-up", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def sign_up(payload: UserCredentials, db: Session = Depends(get_db)):
    repo = UserRepository(db)
    if repo.get_by_username(payload.username):
        raise HTTPException(status_code=400, detail="username already taken")
    try:
        user = repo.create(
            username=payload.username,
            hashed_password=hash_password(payload.password),
        )
    except ValueError as e:
        if str(e) == "username_already_exists":
            raise HTTPException(status_code=400, detail="username already taken")
        raise
    return user

@router.post("/sign-in", response_model=SignInResponse)
def sign_in(payload: UserCredentials, db: Session = Depends(get_db)):
    user = UserRepository(db).get_by_username(payload.username)
    # same answer for unknown user and bad password
    if not user or not verify_password(payload.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="invalid login")
    token = create_access_token(sub=str(user.user_id), extra={"username": user.username})
    return {"token": token, "user": {"user_id": user.user_id, "username": user.username}}
