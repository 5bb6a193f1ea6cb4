# app/repositories/user_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.models import User
from app.repositories.base import BaseRepository

class UserRepository(BaseRepository):
    # READS
    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(User.username == username)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_usernames(self) -> list[str]:
        stmt = select(User.username).order_by(User.user_id.asc())
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    def create(self, *, username: str, hashed_password: str) -> User:
        user = User(username=username, hashed_password=hashed_password)
        try:
            return self.add_and_refresh(user)
        except IntegrityError:
            # Re-raise a clean marker the router can map to 400
            raise ValueError("username_already_exists")
