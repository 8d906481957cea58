"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

# Keep test runs from writing rotating log files into the working directory
os.environ.setdefault("LOG_TO_FILE", "false")

from quirknotes.config import Settings
from quirknotes.database import Database
from quirknotes.main import create_app

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
def test_settings():
    """Settings for testing: SQLite in-memory DB, cheap hashes, no log files."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key="test-secret-key",
        access_token_expire_minutes=60,
        password_hash_rounds=4,
        debug=True,
        log_to_file=False,
    )


@pytest.fixture
def test_database(test_settings):
    """Database kept on one shared in-memory connection for the whole test."""
    return Database(
        test_settings.database_url,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
def test_app(test_settings, test_database):
    """FastAPI app wired to the test settings and database."""
    return create_app(settings=test_settings, database=test_database)


@pytest.fixture
def client(test_app):
    """Test client; entering it runs the lifespan (connect + create tables)."""
    with TestClient(test_app) as c:
        yield c


@pytest.fixture
def test_user_data():
    """Sample user credentials."""
    return {"username": f"testuser_{uuid4().hex[:8]}", "password": "TestPassword123!"}


@pytest.fixture
def registered_user(client, test_user_data):
    """Register a user through the API and return credentials plus token."""
    resp = client.post("/registerUser", json=test_user_data)
    assert resp.status_code == 201, resp.text
    return {**test_user_data, "token": resp.json()["token"]}


@pytest.fixture
def auth_headers(registered_user):
    """Authorization header with a valid JWT for the registered user."""
    return {"Authorization": f"Bearer {registered_user['token']}"}


@pytest.fixture
def test_note_data():
    """Sample note data for testing."""
    return {"title": "Test Note", "content": "This is a test note content"}
