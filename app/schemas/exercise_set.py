from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated
from pydantic import Field, field_validator
from app.schemas.base import APIModel, INT32_MAX

PosInt = Annotated[int, Field(ge=1, le=INT32_MAX)]
NonNegInt = Annotated[int, Field(ge=0, le=INT32_MAX)]
# Heaviest plausible load; the column itself is NUMERIC(10, 2)
NonNegFloat = Annotated[float, Field(ge=0, le=10000)]

class SetEntry(APIModel):
    set_order: PosInt
    reps: NonNegInt | None = None
    weight: NonNegFloat | None = None

    @field_validator("weight")
    @classmethod
    def weight_to_cents(cls, v: float | None) -> float | None:
        # round the way NUMERIC(10, 2) does, so every backend stores the same value
        if v is None:
            return v
        return float(Decimal(str(v)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

class SetRead(SetEntry):
    pass

class SetRow(APIModel):
    set_id: int
    workout_id: int
    exercise_id: int
    set_order: int
    reps: int | None = None
    weight: float | None = None
