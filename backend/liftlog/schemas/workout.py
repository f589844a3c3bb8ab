from datetime import datetime
from pydantic import BaseModel
from liftlog.schemas.exercise import ExerciseWithSets
from liftlog.schemas.exercise_set import WorkoutSet

class WorkoutWithExercises(BaseModel):
    id: str
    created_at: datetime
    finished_at: datetime | None = None
    exercises: tuple[ExerciseWithSets, ...] = ()

    model_config = {"from_attributes": True, "frozen": True}

class ExerciseSummary(BaseModel):
    exercise_id: str
    name: str
    best_set: WorkoutSet | None = None
    volume: float

class WorkoutSummary(BaseModel):
    workout_id: str
    created_at: datetime
    finished_at: datetime | None = None
    exercises: list[ExerciseSummary]
    total_volume: float
