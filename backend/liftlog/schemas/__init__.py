from liftlog.schemas.exercise_set import SetUpdate, WorkoutSet
from liftlog.schemas.exercise import ExerciseCreate, ExerciseWithSets
from liftlog.schemas.workout import WorkoutWithExercises, ExerciseSummary, WorkoutSummary
from liftlog.schemas.session import SessionState

__all__ = [
    "SetUpdate",
    "WorkoutSet",
    "ExerciseCreate",
    "ExerciseWithSets",
    "WorkoutWithExercises",
    "ExerciseSummary",
    "WorkoutSummary",
    "SessionState",
]
