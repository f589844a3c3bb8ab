"""Derived set metrics. Pure functions, no persistence."""
from __future__ import annotations
from typing import Iterable, Optional

from liftlog.schemas.exercise_set import SetUpdate, WorkoutSet

# The estimate divides by (37 - reps); it is undefined from here on
ONE_RM_MAX_REPS = 36


def compute_one_rm(weight: float, reps: int) -> float:
    """Estimated one-rep max: weight * 36 / (37 - reps).

    Raises ValueError for reps above ONE_RM_MAX_REPS instead of returning an
    infinite or negative estimate.
    """
    if reps > ONE_RM_MAX_REPS:
        raise ValueError(f"one-rep max is undefined for {reps} reps (max {ONE_RM_MAX_REPS})")
    return weight * (36.0 / (37.0 - reps))


def total_weight(s: WorkoutSet) -> float:
    return (s.weight or 0) * (s.reps or 0)


def total_volume(sets: Iterable[WorkoutSet]) -> float:
    return sum(total_weight(s) for s in sets)


def best_set(sets: Iterable[WorkoutSet]) -> Optional[WorkoutSet]:
    """Set with the highest one_rm; a missing one_rm counts as 0 and ties keep the first."""
    best: Optional[WorkoutSet] = None
    for s in sets:
        if best is None or (s.one_rm or 0) > (best.one_rm or 0):
            best = s
    return best


def is_complete(s: WorkoutSet) -> bool:
    return s.reps is not None and s.reps > 0


def partition_sets(sets: Iterable[WorkoutSet]) -> tuple[list[WorkoutSet], list[WorkoutSet]]:
    """Split into (complete, incomplete), each keeping input order."""
    complete: list[WorkoutSet] = []
    incomplete: list[WorkoutSet] = []
    for s in sets:
        (complete if is_complete(s) else incomplete).append(s)
    return complete, incomplete


def apply_set_update(s: WorkoutSet, update: SetUpdate) -> WorkoutSet:
    """Return a copy of ``s`` with the supplied fields overwritten and one_rm recomputed.

    This is the only place one_rm is derived. It is recomputed whenever both
    reps and weight are present, and cleared when reps is past the formula's range.
    """
    changes = update.model_dump(exclude_unset=True, exclude_none=True)
    reps = changes.get("reps", s.reps)
    weight = changes.get("weight", s.weight)
    if reps is not None and weight is not None:
        changes["one_rm"] = compute_one_rm(weight, reps) if reps <= ONE_RM_MAX_REPS else None
    return s.model_copy(update=changes)
