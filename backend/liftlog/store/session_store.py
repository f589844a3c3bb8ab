from __future__ import annotations
import logging
import threading
from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Iterator, Mapping, Optional

from sqlalchemy.orm import Session, sessionmaker

from liftlog.ids import new_id
from liftlog.schemas.exercise import ExerciseWithSets
from liftlog.schemas.exercise_set import SetUpdate, WorkoutSet
from liftlog.schemas.session import SessionState
from liftlog.schemas.workout import WorkoutWithExercises
from liftlog.services import Services, build_services
from liftlog.services.workout_service import utcnow
from liftlog.store import transitions as t

log = logging.getLogger(__name__)

Listener = Callable[[SessionState], None]


class StartOutcome(str, Enum):
    started = "started"
    already_in_progress = "already_in_progress"


class SessionStore:
    """Owns the session snapshot and is the only writer of it.

    Every public method is one transition: it runs the lifecycle services
    (which talk to storage), folds the result into a new immutable
    SessionState and notifies subscribers synchronously. Calls that do not
    match the current state (no workout in progress, unknown id) change
    nothing and notify no one.

    Persistence is optimistic: a failed write is logged by the services and
    the in-memory state keeps the change.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        *,
        id_factory: Callable[[], str] = new_id,
        clock=utcnow,
        persist_on_start: bool = False,
    ):
        self._session_factory = session_factory
        self._id_factory = id_factory
        self._clock = clock
        self._persist_on_start = persist_on_start
        self._state = SessionState()
        self._listeners: list[Listener] = []
        # Reentrant so a listener may read state or trigger another transition
        self.state_lock = threading.RLock()

    @property
    def state(self) -> SessionState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; call the returned function to unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # TRANSITIONS
    def load(self) -> SessionState:
        with self.state_lock, self._services() as svc:
            current = svc.workouts.load_current()
            workouts = svc.workouts.load_all()
            self._commit(t.loaded(current, workouts))
            log.info("loaded session: current=%s history=%d",
                     current.id if current else None, len(workouts))
            return self._state

    def start_workout(self) -> StartOutcome:
        with self.state_lock:
            if self._state.current_workout is not None:
                log.info("workout %s already in progress", self._state.current_workout.id)
                return StartOutcome.already_in_progress
            with self._services() as svc:
                workout = svc.workouts.start()
            self._commit(t.started(self._state, workout))
            return StartOutcome.started

    def finish_workout(self) -> Optional[WorkoutWithExercises]:
        with self.state_lock:
            current = self._state.current_workout
            if current is None:
                return None
            with self._services() as svc:
                workout = svc.workouts.finish(current)
            self._commit(t.finished(self._state, workout))
            return workout

    def add_exercise(self, name: str) -> Optional[ExerciseWithSets]:
        with self.state_lock:
            current = self._state.current_workout
            if current is None:
                return None
            with self._services() as svc:
                exercise = svc.exercises.create(name, current.id)
            self._commit(t.exercise_added(self._state, exercise))
            return exercise

    def add_set(self, exercise_id: str) -> Optional[WorkoutSet]:
        with self.state_lock:
            if t.find_exercise(self._state.current_workout, exercise_id) is None:
                return None
            with self._services() as svc:
                new_set = svc.sets.create(exercise_id)
            self._commit(t.set_added(self._state, exercise_id, new_set))
            return new_set

    def update_set(self, set_id: str, fields: SetUpdate | Mapping[str, Any]) -> Optional[WorkoutSet]:
        if not isinstance(fields, SetUpdate):
            fields = SetUpdate.model_validate(fields)
        with self.state_lock:
            match = t.find_set(self._state.current_workout, set_id)
            if match is None:
                return None
            _, current_set = match
            with self._services() as svc:
                updated = svc.sets.update(current_set, fields)
            self._commit(t.set_replaced(self._state, updated))
            return updated

    def delete_set(self, set_id: str) -> bool:
        with self.state_lock:
            match = t.find_set(self._state.current_workout, set_id)
            if match is None:
                return False
            exercise, _ = match
            with self._services() as svc:
                svc.sets.delete(set_id)
                if len(exercise.sets) == 1:
                    svc.exercises.discard(exercise.id)
            self._commit(t.set_removed(self._state, set_id))
            return True

    # INTERNALS
    @contextmanager
    def _services(self) -> Iterator[Services]:
        with self._session_factory() as db:
            yield build_services(
                db,
                id_factory=self._id_factory,
                clock=self._clock,
                persist_on_start=self._persist_on_start,
            )

    def _commit(self, new_state: SessionState) -> None:
        self._state = new_state
        for listener in list(self._listeners):
            # State is already committed; log a failing observer and keep notifying the rest
            try:
                listener(new_state)
            except Exception:
                log.exception("session listener %r failed", listener)
