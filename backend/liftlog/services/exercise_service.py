from __future__ import annotations
import logging
from typing import Callable

from liftlog.errors import PersistenceError
from liftlog.ids import new_id
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.schemas.exercise import ExerciseWithSets

log = logging.getLogger(__name__)

class ExerciseService:
    def __init__(self, repo: ExerciseRepository, *, id_factory: Callable[[], str] = new_id):
        self.repo = repo
        self.id_factory = id_factory

    def create(self, name: str, workout_id: str) -> ExerciseWithSets:
        exercise = ExerciseWithSets(id=self.id_factory(), name=name, workout_id=workout_id)
        try:
            self.repo.save(exercise)
        except PersistenceError as e:
            log.warning("exercise %s not saved: %s", exercise.id, e)
        return exercise

    def discard(self, exercise_id: str) -> None:
        """Remove an exercise that no longer has any sets."""
        try:
            self.repo.delete(exercise_id)
        except PersistenceError as e:
            log.warning("exercise %s not deleted: %s", exercise_id, e)
