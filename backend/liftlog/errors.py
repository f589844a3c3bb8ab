class PersistenceError(Exception):
    """A database read or write failed. The session has already been rolled back."""

    def __init__(self, action: str, entity_id: str | None = None):
        self.action = action
        self.entity_id = entity_id
        msg = action if entity_id is None else f"{action} ({entity_id})"
        super().__init__(msg)
