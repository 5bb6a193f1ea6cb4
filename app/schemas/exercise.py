from app.schemas.base import APIModel

class ExerciseRead(APIModel):
    exercise_id: int
    name: str
    muscle_group: str
    equipment: str | None = None
