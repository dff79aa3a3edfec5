"""Fixtures for pytest to set up the testing environment."""

from __future__ import annotations

import os

# Point the application at an in-memory SQLite database before it is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENFORCE_UNIQUE_EMAIL"] = "false"

import pytest
from fastapi.testclient import TestClient

from sss_registry import models  # noqa: F401  registers the tables
from sss_registry.database import Base, SessionLocal, engine
from sss_registry.main import app


@pytest.fixture(name="db")
def fixture_db():
    """Fresh schema and a session for each test."""

    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(name="client")
def fixture_client(db) -> TestClient:
    """Test client sharing the in-memory database with ``db``."""

    del db  # fixture invoked for the schema
    return TestClient(app)
