from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, Text
from app.db import Base

class Exercise(Base):
    """Reference catalogue entry. Never written by the workout routes."""
    __tablename__ = "exercises"
    exercise_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    muscle_group: Mapped[str] = mapped_column(Text, nullable=False)
    equipment: Mapped[str | None] = mapped_column(Text, nullable=True)
