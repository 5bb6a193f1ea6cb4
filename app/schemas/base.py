from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# ids, set orders and reps are 32-bit INTEGER columns
INT32_MAX = 2**31 - 1

class APIModel(BaseModel):
    """camelCase on the wire, snake_case in Python; accepts either on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
