from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.repositories.set_repo import SetRepository

__all__ = ["WorkoutRepository", "ExerciseRepository", "SetRepository"]
