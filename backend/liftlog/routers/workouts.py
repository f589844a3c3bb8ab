from fastapi import APIRouter, Depends, HTTPException, status
from liftlog.deps.store import get_store
from liftlog.schemas.workout import WorkoutSummary, WorkoutWithExercises
from liftlog.services.workout_service import WorkoutService
from liftlog.store import SessionStore

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("", response_model=list[WorkoutWithExercises])
def list_workouts(store: SessionStore = Depends(get_store)):
    return list(store.state.workouts)

@router.get("/{workout_id}/summary", response_model=WorkoutSummary)
def workout_summary(workout_id: str, store: SessionStore = Depends(get_store)):
    workout = next((w for w in store.state.workouts if w.id == workout_id), None)
    if workout is None and store.state.current_workout and store.state.current_workout.id == workout_id:
        workout = store.state.current_workout
    if workout is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return WorkoutService.summarize(workout)
