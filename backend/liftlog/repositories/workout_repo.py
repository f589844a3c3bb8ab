from __future__ import annotations
from typing import Optional
from sqlalchemy import select
from liftlog.models import Workout
from liftlog.repositories.base import BaseRepository

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    # READS
    def get_current(self) -> Optional[Workout]:
        """Most recently created workout that has not been finished."""
        stmt = select(Workout).where(Workout.finished_at.is_(None))\
                              .order_by(Workout.created_at.desc())\
                              .limit(1)
        rows = self.all(stmt)
        return rows[0] if rows else None

    def get_finished(self) -> list[Workout]:
        stmt = select(Workout).where(Workout.finished_at.is_not(None))\
                              .order_by(Workout.created_at.desc())
        return self.all(stmt)

    # WRITES
    def save(self, workout) -> Workout:
        return self.upsert(workout.id, {
            "created_at": workout.created_at,
            "finished_at": workout.finished_at,
        })
