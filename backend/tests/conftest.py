"""
Point the app at a private in-memory SQLite database before anything imports
liftlog.db, and give every test empty tables.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient

from liftlog import models  # noqa: F401
from liftlog.db import Base, SessionLocal, engine
from liftlog.store import SessionStore


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    with SessionLocal() as session:
        yield session


@pytest.fixture
def store():
    return SessionStore(SessionLocal)


@pytest.fixture
def client():
    from liftlog.main import app
    with TestClient(app) as c:
        yield c
