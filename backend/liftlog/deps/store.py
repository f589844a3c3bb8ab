# liftlog/deps/store.py
from fastapi import HTTPException, Request, status

from liftlog.store import SessionStore


def get_store(request: Request) -> SessionStore:
    """The application's single SessionStore, created in the lifespan handler."""
    return request.app.state.store


def require_current_workout(request: Request) -> SessionStore:
    store = get_store(request)
    if store.state.current_workout is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No workout in progress")
    return store
