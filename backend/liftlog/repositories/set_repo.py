from __future__ import annotations
from sqlalchemy import select
from liftlog.models import ExerciseSet
from liftlog.repositories.base import BaseRepository

class SetRepository(BaseRepository[ExerciseSet]):
    model = ExerciseSet

    def list_by_exercise(self, exercise_id: str) -> list[ExerciseSet]:
        stmt = select(ExerciseSet).where(ExerciseSet.exercise_id == exercise_id)\
                                  .order_by(ExerciseSet.position.asc())
        return self.all(stmt)

    def save(self, s) -> ExerciseSet:
        return self.upsert(
            s.id,
            {"exercise_id": s.exercise_id, "reps": s.reps, "weight": s.weight, "one_rm": s.one_rm},
            parent=(ExerciseSet.exercise_id, s.exercise_id),
        )
