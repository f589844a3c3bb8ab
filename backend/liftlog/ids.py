import uuid


def new_id() -> str:
    """Opaque unique identifier for workouts, exercises and sets."""
    return str(uuid.uuid4())
