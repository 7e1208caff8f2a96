"""
Task Tracker API - Test Configuration

Shared fixtures for CI-safe testing without MongoDB.
"""

import os

# Must be set before tracker.config is imported
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-the-tracker-suite-0123456789")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from tracker.auth.password import PasswordHasher
from tracker.auth.tokens import TokenIssuer
from tracker.config import settings
from tracker.main import app
from tracker.tasks.repository import InMemoryTaskRepository
from tracker.tasks.router import get_task_repository
from tracker.users.dependencies import get_user_repository
from tracker.users.repository import InMemoryUserRepository


@pytest.fixture
def user_repository():
    """Provide a fresh in-memory user repository for each test."""
    return InMemoryUserRepository()


@pytest.fixture
def task_repository():
    """Provide a fresh in-memory task repository for each test."""
    return InMemoryTaskRepository()


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_issuer():
    return TokenIssuer.from_settings(settings)


@pytest.fixture
def client(user_repository, task_repository):
    """Create test client with in-memory repositories."""
    app.dependency_overrides[get_user_repository] = lambda: user_repository
    app.dependency_overrides[get_task_repository] = lambda: task_repository

    yield TestClient(app)
    # Clean up override after test
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Register a test user and return credentials."""
    credentials = {
        "username": "testuser",
        "first_name": "Test",
        "last_name": "User",
        "password": "testpassword123",
    }
    client.post("/auth/register", json=credentials)
    return credentials


@pytest.fixture
def auth_token(client, registered_user):
    """Get an auth token for the registered user."""
    response = client.post(
        "/auth/login",
        json={"username": registered_user["username"], "password": registered_user["password"]},
    )
    return response.json()["token"]


@pytest.fixture
def auth_headers(auth_token):
    """Create Authorization headers for authenticated requests."""
    return {"Authorization": f"Bearer {auth_token}"}


class FrozenClock:
    """A clock that returns a fixed time for deterministic testing."""

    def __init__(self, frozen_time: datetime):
        self._frozen_time = frozen_time

    def __call__(self) -> datetime:
        return self._frozen_time

    def advance(self, delta: timedelta) -> None:
        self._frozen_time += delta


@pytest.fixture
def frozen_now() -> datetime:
    """A fixed 'now' time for testing."""
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock(frozen_now) -> FrozenClock:
    return FrozenClock(frozen_now)
