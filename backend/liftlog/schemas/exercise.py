from typing import Annotated
from pydantic import BaseModel, Field, field_validator
from liftlog.schemas.exercise_set import WorkoutSet

# Keep max length via Field
ExerciseName = Annotated[str, Field(max_length=120)]

class ExerciseCreate(BaseModel):
    name: ExerciseName

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("exercise name cannot be blank")
        return v2

class ExerciseWithSets(BaseModel):
    id: str
    name: str
    workout_id: str
    sets: tuple[WorkoutSet, ...] = ()

    model_config = {"from_attributes": True, "frozen": True}
