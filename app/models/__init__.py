from app.models.user import User
from app.models.workout import Workout
from app.models.exercise import Exercise
from app.models.exercise_set import ExerciseSet

__all__ = ["User", "Workout", "Exercise", "ExerciseSet"]
