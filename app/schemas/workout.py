from typing import Annotated
from datetime import datetime
from pydantic import Field, StringConstraints
from app.schemas.base import APIModel, INT32_MAX
from app.schemas.exercise_set import SetEntry, SetRead

# Names: trimmed, up to 200 chars
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=200)]
PosInt = Annotated[int, Field(ge=1, le=INT32_MAX)]

class WorkoutCreate(APIModel):
    workout_name: NameStr | None = None

class WorkoutRead(APIModel):
    workout_id: int
    user_id: int
    workout_name: str | None = None
    created_at: datetime
    completed_at: datetime | None = None

class ExercisesAttach(APIModel):
    workout_id: PosInt
    exercise_ids: Annotated[list[PosInt], Field(min_length=1)]
    # Kept for older clients; the caller's identity comes from the token
    user_id: int | None = None

class ExerciseSets(APIModel):
    exercise_id: PosInt
    sets: list[SetEntry]

class WorkoutSetsUpdate(APIModel):
    exercises: list[ExerciseSets]
    workout_name: NameStr | None = None

class WorkoutComplete(APIModel):
    workout_name: NameStr | None = None

class ExerciseSwap(APIModel):
    new_exercise_id: PosInt

class WorkoutExercise(APIModel):
    exercise_id: int
    name: str
    muscle_group: str
    equipment: str | None = None
    sets: list[SetRead] = []

class WorkoutDetail(APIModel):
    workout_id: int
    workout_name: str | None = None
    completed_at: datetime | None = None
    exercises: list[WorkoutExercise] = []
