from typing import Annotated
from pydantic import BaseModel, Field

NonNegInt = Annotated[int, Field(ge=0)]
NonNegFloat = Annotated[float, Field(ge=0)]

class SetUpdate(BaseModel):
    # Omitted fields keep their previous value
    reps: NonNegInt | None = None
    weight: NonNegFloat | None = None

class WorkoutSet(BaseModel):
    id: str
    exercise_id: str
    reps: int | None = None
    weight: float | None = None
    one_rm: float | None = None

    model_config = {"from_attributes": True, "frozen": True}
