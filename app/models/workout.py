from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, ForeignKey, DateTime, Text, func
from app.db import Base

class Workout(Base):
    __tablename__ = "workouts"
    workout_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.user_id", ondelete="CASCADE"), index=True, nullable=False)
    workout_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    # null while in progress; set once by the completion route
    completed_at: Mapped[DateTime | None] = mapped_column(DateTime(timezone=True), nullable=True)
