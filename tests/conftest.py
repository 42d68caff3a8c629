"""Shared fixtures: in-memory store, fixed clock and an API test client."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.routes import get_exercise_service
from services.exercise_service import ExerciseService
from services.store import InMemoryExerciseStore

FIXED_NOW = datetime(2024, 3, 5, 14, 30)


@pytest.fixture
def clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def store():
    return InMemoryExerciseStore()


@pytest.fixture
def service(store, clock):
    return ExerciseService(store, clock=clock)


@pytest.fixture
def client(service):
    """Test client whose routes run against the in-memory store."""
    app.dependency_overrides[get_exercise_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_id(client):
    """Id of a freshly registered user."""
    resp = client.post("/api/users", json={"username": "alice"})
    return resp.json()["_id"]
