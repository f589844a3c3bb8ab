from __future__ import annotations
from sqlalchemy import select
from liftlog.models import Exercise
from liftlog.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    def list_by_workout(self, workout_id: str) -> list[Exercise]:
        stmt = select(Exercise).where(Exercise.workout_id == workout_id).order_by(Exercise.position.asc())
        return self.all(stmt)

    def save(self, exercise) -> Exercise:
        return self.upsert(
            exercise.id,
            {"name": exercise.name, "workout_id": exercise.workout_id},
            parent=(Exercise.workout_id, exercise.workout_id),
        )
