"""Shared fixtures for the test suite."""

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.services.database import DatabaseService

USERS_URL = "/api/v1/users"


@pytest.fixture
def database():
    """In-memory SQLite database, opened and closed around each test."""
    db = DatabaseService("sqlite://")
    db.open()
    yield db
    db.close()


@pytest.fixture
def client(database):
    """Test client for an application backed by the in-memory database."""
    app = create_app(database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_payload():
    return {
        "name": "Ani Lestari",
        "email": "ani@example.com",
        "password": "secret123",
        "_passwordconfirm": "secret123",
    }


@pytest.fixture
def created_user(client, create_payload):
    """Create a user through the API and return its summary."""
    response = client.post(USERS_URL, json=create_payload)
    assert response.status_code == 200
    users = client.get(USERS_URL).json()
    return next(user for user in users if user["email"] == create_payload["email"])
