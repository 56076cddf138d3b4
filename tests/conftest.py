"""
Shared pytest fixtures.

Each test gets a fresh in-memory SQLite database.  ``StaticPool`` keeps
one connection alive so that every session, and the API routes running
in TestClient's worker thread, see the same database.
"""

import os

# Must be set before pet_store reads its settings
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT", "10000/minute")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from pet_store.database import create_db_engine, get_read_session, get_write_session
from pet_store.main import app


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        yield session

    app.dependency_overrides[get_write_session] = get_session_override
    app.dependency_overrides[get_read_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
