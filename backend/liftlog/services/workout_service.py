from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from liftlog.errors import PersistenceError
from liftlog.ids import new_id
from liftlog.models import Workout
from liftlog.repositories import ExerciseRepository, SetRepository, WorkoutRepository
from liftlog.schemas.exercise import ExerciseWithSets
from liftlog.schemas.exercise_set import WorkoutSet
from liftlog.schemas.workout import ExerciseSummary, WorkoutSummary, WorkoutWithExercises
from liftlog.services.exercise_service import ExerciseService
from liftlog.services.set_calculator import best_set, total_volume
from liftlog.services.set_service import SetService

log = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime | None) -> datetime | None:
    # SQLite hands timestamps back without tzinfo
    if dt is not None and dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


class WorkoutService:
    def __init__(
        self,
        workouts: WorkoutRepository,
        exercises: ExerciseRepository,
        sets: SetRepository,
        *,
        set_service: SetService,
        exercise_service: ExerciseService,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = utcnow,
        persist_on_start: bool = False,
    ):
        self.workouts = workouts
        self.exercises = exercises
        self.sets = sets
        self.set_service = set_service
        self.exercise_service = exercise_service
        self.id_factory = id_factory
        self.clock = clock
        self.persist_on_start = persist_on_start

    def start(self) -> WorkoutWithExercises:
        workout = WorkoutWithExercises(id=self.id_factory(), created_at=self.clock())
        if self.persist_on_start:
            self._save(workout)
        return workout

    def finish(self, workout: WorkoutWithExercises) -> WorkoutWithExercises:
        """Prune incomplete sets and empty exercises, stamp finished_at and persist."""
        kept: list[ExerciseWithSets] = []
        for exercise in workout.exercises:
            complete = self.set_service.filter_complete(exercise.sets)
            if not complete:
                self.exercise_service.discard(exercise.id)
                continue
            kept.append(exercise.model_copy(update={"sets": tuple(complete)}))

        finished = workout.model_copy(update={
            "exercises": tuple(kept),
            "finished_at": max(self.clock(), workout.created_at),
        })
        self._save(finished)
        return finished

    def load_current(self) -> Optional[WorkoutWithExercises]:
        try:
            row = self.workouts.get_current()
            return self._assemble(row) if row is not None else None
        except PersistenceError:
            log.exception("could not load the current workout")
            return None

    def load_all(self) -> list[WorkoutWithExercises]:
        try:
            return [self._assemble(row) for row in self.workouts.get_finished()]
        except PersistenceError:
            log.exception("could not load workout history")
            return []

    @staticmethod
    def summarize(workout: WorkoutWithExercises) -> WorkoutSummary:
        exercises = [
            ExerciseSummary(
                exercise_id=e.id,
                name=e.name,
                best_set=best_set(e.sets),
                volume=total_volume(e.sets),
            )
            for e in workout.exercises
        ]
        return WorkoutSummary(
            workout_id=workout.id,
            created_at=workout.created_at,
            finished_at=workout.finished_at,
            exercises=exercises,
            total_volume=sum(e.volume for e in exercises),
        )

    def _assemble(self, row: Workout) -> WorkoutWithExercises:
        """Join a workout row with its exercises and their sets."""
        exercises = tuple(
            ExerciseWithSets(
                id=e.id,
                name=e.name,
                workout_id=e.workout_id,
                sets=tuple(WorkoutSet.model_validate(s) for s in self.sets.list_by_exercise(e.id)),
            )
            for e in self.exercises.list_by_workout(row.id)
        )
        return WorkoutWithExercises(
            id=row.id,
            created_at=as_utc(row.created_at),
            finished_at=as_utc(row.finished_at),
            exercises=exercises,
        )

    def _save(self, workout: WorkoutWithExercises) -> None:
        try:
            self.workouts.save(workout)
        except PersistenceError as e:
            log.warning("workout %s not saved: %s", workout.id, e)
