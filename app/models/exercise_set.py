from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Index, Integer, ForeignKey, Numeric
from app.db import Base

class ExerciseSet(Base):
    __tablename__ = "sets"
    __table_args__ = (
        # (workout_id, exercise_id, set_order) is deliberately not unique: sets past the first are appended
        Index("ix_sets_workout_exercise", "workout_id", "exercise_id"),
    )
    set_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    workout_id: Mapped[int] = mapped_column(ForeignKey("workouts.workout_id", ondelete="CASCADE"), nullable=False)
    exercise_id: Mapped[int] = mapped_column(ForeignKey("exercises.exercise_id"), nullable=False, index=True)
    set_order: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weight: Mapped[float | None] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=True)
