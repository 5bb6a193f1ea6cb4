# app/repositories/base.py
from __future__ import annotations
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

class BaseRepository:
    """Lightweight base for repositories using SQLAlchemy 2.0 style.

    Every write commits on its own; a failed statement is rolled back and the
    error re-raised for the app-level handler to map.
    """
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def write(self):
        try:
            yield
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise

    def add_and_refresh(self, entity):
        with self.write():
            self.db.add(entity)
        self.db.refresh(entity)
        return entity
