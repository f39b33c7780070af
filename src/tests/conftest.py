"""Shared fixtures for the backend tests.

Every test runs against a fresh in-memory SQLite database wired into the
FastAPI app through the get_db dependency.
"""
import os

# Must be set before the app modules read configuration
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from api.main import app
from api.schemas.program_schemas import ClientProfile
from db.database import get_db
from db.models import Base


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def api_client(engine):
    """TestClient with get_db pointed at the test database."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client_payload():
    return {
        "name": "John Doe",
        "age": 30,
        "gender": "Male",
        "height": 180,
        "weight": 85,
        "experience": "Intermediate",
        "goals": "Strength",
        "training_frequency": 4,
        "equipment": "Barbell, Dumbbell",
        "session_duration": 60,
    }


@pytest.fixture
def make_profile():
    def _make(training_frequency=4, goals="Strength", name="Alex"):
        return ClientProfile(
            name=name,
            training_frequency=training_frequency,
            goals=goals,
            experience="Intermediate",
        )
    return _make
