from datetime import datetime
from app.schemas.base import APIModel

class BestSetRead(APIModel):
    """Heaviest-volume set of one exercise within one workout."""
    exercise_id: int
    name: str
    muscle_group: str
    equipment: str | None = None
    reps: int
    weight: float
    volume: float
    total_sets: int
    workout_id: int
    workout_name: str | None = None
    completed_at: datetime | None = None
