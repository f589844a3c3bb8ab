"""Pure session-state transitions.

Each function takes a snapshot and returns the next one. Nothing here touches
storage; an argument that does not match the current state returns the input
snapshot unchanged.
"""
from __future__ import annotations
from typing import Callable, Iterable, Optional

from liftlog.schemas.exercise import ExerciseWithSets
from liftlog.schemas.exercise_set import WorkoutSet
from liftlog.schemas.session import SessionState
from liftlog.schemas.workout import WorkoutWithExercises


def find_exercise(workout: Optional[WorkoutWithExercises], exercise_id: str) -> Optional[ExerciseWithSets]:
    if workout is None:
        return None
    return next((e for e in workout.exercises if e.id == exercise_id), None)


def find_set(
    workout: Optional[WorkoutWithExercises], set_id: str
) -> Optional[tuple[ExerciseWithSets, WorkoutSet]]:
    """Owning exercise and the set itself, or None."""
    if workout is None:
        return None
    for exercise in workout.exercises:
        for s in exercise.sets:
            if s.id == set_id:
                return exercise, s
    return None


def loaded(current: Optional[WorkoutWithExercises], workouts: Iterable[WorkoutWithExercises]) -> SessionState:
    return SessionState(current_workout=current, workouts=tuple(workouts))


def started(state: SessionState, workout: WorkoutWithExercises) -> SessionState:
    if state.current_workout is not None:
        return state
    return state.model_copy(update={"current_workout": workout})


def finished(state: SessionState, workout: WorkoutWithExercises) -> SessionState:
    """Clear the current workout and put the finished one at the head of the history."""
    return state.model_copy(update={
        "current_workout": None,
        "workouts": (workout,) + state.workouts,
    })


def exercise_added(state: SessionState, exercise: ExerciseWithSets) -> SessionState:
    current = state.current_workout
    if current is None:
        return state
    workout = current.model_copy(update={"exercises": current.exercises + (exercise,)})
    return state.model_copy(update={"current_workout": workout})


def set_added(state: SessionState, exercise_id: str, new_set: WorkoutSet) -> SessionState:
    return _map_exercise(
        state, exercise_id,
        lambda e: e.model_copy(update={"sets": e.sets + (new_set,)}),
    )


def set_replaced(state: SessionState, updated: WorkoutSet) -> SessionState:
    match = find_set(state.current_workout, updated.id)
    if match is None:
        return state
    exercise, _ = match
    return _map_exercise(
        state, exercise.id,
        lambda e: e.model_copy(update={"sets": tuple(updated if s.id == updated.id else s for s in e.sets)}),
    )


def set_removed(state: SessionState, set_id: str) -> SessionState:
    """Drop the set; drop its exercise too when that was the last set."""
    match = find_set(state.current_workout, set_id)
    if match is None:
        return state
    exercise, _ = match
    remaining = tuple(s for s in exercise.sets if s.id != set_id)
    current = state.current_workout
    if remaining:
        return _map_exercise(state, exercise.id, lambda e: e.model_copy(update={"sets": remaining}))
    workout = current.model_copy(update={
        "exercises": tuple(e for e in current.exercises if e.id != exercise.id),
    })
    return state.model_copy(update={"current_workout": workout})


def _map_exercise(
    state: SessionState, exercise_id: str, fn: Callable[[ExerciseWithSets], ExerciseWithSets]
) -> SessionState:
    current = state.current_workout
    if find_exercise(current, exercise_id) is None:
        return state
    workout = current.model_copy(update={
        "exercises": tuple(fn(e) if e.id == exercise_id else e for e in current.exercises),
    })
    return state.model_copy(update={"current_workout": workout})
