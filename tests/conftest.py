# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a temporary SQLite database per test
# - Provides TestClients for anonymous and logged-in admin requests
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")
os.environ.setdefault("ADMIN_PASSWORD", "test-password")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.auth import SessionStore
from app.main import app
from lib.database import Database

ADMIN_EMAIL = os.environ["ADMIN_EMAIL"]
ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def database(tmp_path):
    """A fresh, initialized database file."""
    db = Database(tmp_path / "test.sqlite")
    db.initialize()
    return db


@pytest.fixture
def conn(database):
    """An open connection to the test database."""
    with database.connect() as connection:
        yield connection


@pytest.fixture
def session_store():
    return SessionStore(secret="test-session-secret", max_age_seconds=3600)


@pytest.fixture
def client(database, session_store):
    """
    Anonymous client.

    The lifespan is not run; the handles it would create are set on
    app.state directly so each test gets its own database.
    """
    app.state.database = database
    app.state.sessions = session_store
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def unopenable_database(client, tmp_path):
    """
    Point the app at a directory, which sqlite can't open as a database
    file, so every connection attempt fails.
    """
    app.state.database = Database(tmp_path)
    return app.state.database


@pytest.fixture
def admin_client(client):
    """Client that has logged in as the admin."""
    response = client.post(
        "/admin/login",
        data={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/admin"
    return client


@pytest.fixture
def sample_post_data():
    """Form data for a post."""
    return {
        "slug": "hello-world",
        "title": "Hello World",
        "excerpt": "A first post",
        "content": "# Hello\n\nSome **bold** text.",
    }


@pytest.fixture
def sample_contact_data():
    """A complete contact submission."""
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "message": "Are you available for a project?",
    }
