from pydantic import BaseModel
from liftlog.schemas.workout import WorkoutWithExercises

class SessionState(BaseModel):
    """One immutable snapshot of the whole session: the workout in progress and the history."""
    current_workout: WorkoutWithExercises | None = None
    workouts: tuple[WorkoutWithExercises, ...] = ()

    model_config = {"frozen": True}
