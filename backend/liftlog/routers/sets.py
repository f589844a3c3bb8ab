from fastapi import APIRouter, Depends, HTTPException, Response, status
from liftlog.deps.store import get_store
from liftlog.schemas.exercise_set import SetUpdate, WorkoutSet
from liftlog.store import SessionStore

router = APIRouter(prefix="/session", tags=["sets"])

@router.post("/exercises/{exercise_id}/sets", response_model=WorkoutSet, status_code=status.HTTP_201_CREATED)
def add_set(exercise_id: str, store: SessionStore = Depends(get_store)):
    new_set = store.add_set(exercise_id)
    if new_set is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return new_set

@router.patch("/sets/{set_id}", response_model=WorkoutSet)
def update_set(set_id: str, payload: SetUpdate, store: SessionStore = Depends(get_store)):
    updated = store.update_set(set_id, payload)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found")
    return updated

@router.delete("/sets/{set_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_set(set_id: str, store: SessionStore = Depends(get_store)):
    if not store.delete_set(set_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
