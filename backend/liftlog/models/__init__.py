from liftlog.models.workout import Workout
from liftlog.models.exercise import Exercise
from liftlog.models.exercise_set import ExerciseSet

__all__ = ["Workout", "Exercise", "ExerciseSet"]
