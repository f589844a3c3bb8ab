from fastapi import APIRouter, Depends, HTTPException, status
from liftlog.deps.store import get_store, require_current_workout
from liftlog.schemas.exercise import ExerciseCreate, ExerciseWithSets
from liftlog.schemas.session import SessionState
from liftlog.schemas.workout import WorkoutWithExercises
from liftlog.store import SessionStore, StartOutcome

router = APIRouter(prefix="/session", tags=["session"])

@router.get("", response_model=SessionState)
def read_session(store: SessionStore = Depends(get_store)):
    return store.state

@router.post("/start", response_model=WorkoutWithExercises, status_code=status.HTTP_201_CREATED)
def start_workout(store: SessionStore = Depends(get_store)):
    outcome = store.start_workout()
    if outcome is StartOutcome.already_in_progress:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Workout already in progress")
    return store.state.current_workout

@router.post("/finish", response_model=WorkoutWithExercises)
def finish_workout(store: SessionStore = Depends(require_current_workout)):
    finished = store.finish_workout()
    if finished is None:
        # Another request finished it first
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No workout in progress")
    return finished

@router.post("/exercises", response_model=ExerciseWithSets, status_code=status.HTTP_201_CREATED)
def add_exercise(payload: ExerciseCreate, store: SessionStore = Depends(require_current_workout)):
    exercise = store.add_exercise(payload.name)
    if exercise is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No workout in progress")
    return exercise
