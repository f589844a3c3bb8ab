from liftlog.store.session_store import SessionStore, StartOutcome

__all__ = ["SessionStore", "StartOutcome"]
