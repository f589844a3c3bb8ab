from __future__ import annotations
import logging
from typing import Callable, Iterable

from liftlog.errors import PersistenceError
from liftlog.ids import new_id
from liftlog.repositories.set_repo import SetRepository
from liftlog.schemas.exercise_set import SetUpdate, WorkoutSet
from liftlog.services.set_calculator import apply_set_update, partition_sets

log = logging.getLogger(__name__)

class SetService:
    def __init__(self, repo: SetRepository, *, id_factory: Callable[[], str] = new_id):
        self.repo = repo
        self.id_factory = id_factory

    def create(self, exercise_id: str) -> WorkoutSet:
        new_set = WorkoutSet(id=self.id_factory(), exercise_id=exercise_id)
        self._save(new_set)
        return new_set

    def update(self, s: WorkoutSet, fields: SetUpdate) -> WorkoutSet:
        updated = apply_set_update(s, fields)
        self._save(updated)
        return updated

    def delete(self, set_id: str) -> None:
        try:
            self.repo.delete(set_id)
        except PersistenceError as e:
            log.warning("set %s not deleted: %s", set_id, e)

    def filter_complete(self, sets: Iterable[WorkoutSet]) -> list[WorkoutSet]:
        """Keep complete sets; incomplete ones are deleted from storage."""
        complete, incomplete = partition_sets(sets)
        for s in incomplete:
            self.delete(s.id)
        return complete

    def _save(self, s: WorkoutSet) -> None:
        # The caller keeps the in-memory value even when the write fails
        try:
            self.repo.save(s)
        except PersistenceError as e:
            log.warning("set %s not saved: %s", s.id, e)
