from __future__ import annotations
from dataclasses import dataclass
from typing import Callable

from sqlalchemy.orm import Session

from liftlog.ids import new_id
from liftlog.repositories import ExerciseRepository, SetRepository, WorkoutRepository
from liftlog.services.exercise_service import ExerciseService
from liftlog.services.set_service import SetService
from liftlog.services.workout_service import WorkoutService, utcnow


@dataclass(slots=True)
class Services:
    workouts: WorkoutService
    exercises: ExerciseService
    sets: SetService


def build_services(
    db: Session,
    *,
    id_factory: Callable[[], str] = new_id,
    clock=utcnow,
    persist_on_start: bool = False,
) -> Services:
    """Wire the lifecycle services to repositories sharing one database session."""
    set_repo = SetRepository(db)
    exercise_repo = ExerciseRepository(db)
    sets = SetService(set_repo, id_factory=id_factory)
    exercises = ExerciseService(exercise_repo, id_factory=id_factory)
    workouts = WorkoutService(
        WorkoutRepository(db),
        exercise_repo,
        set_repo,
        set_service=sets,
        exercise_service=exercises,
        id_factory=id_factory,
        clock=clock,
        persist_on_start=persist_on_start,
    )
    return Services(workouts=workouts, exercises=exercises, sets=sets)
