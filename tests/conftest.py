# tests/conftest.py
"""
Shared fixtures. The environment is pinned before any app module is imported:
in-memory SQLite, cheap bcrypt rounds, logs in the temp dir.
"""

import sys
import os
import tempfile
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["AUTH_ENABLED"] = "true"
os.environ["SEED_DEFAULT_USERS"] = "true"
os.environ["LOG_DIR"] = os.path.join(tempfile.gettempdir(), "fms-test-logs")

import pytest
from fastapi.testclient import TestClient
from app.database import SessionLocal, create_tables, drop_tables

ADMIN = ("admin", "admin123")
USER = ("user", "user123")


@pytest.fixture
def db():
    """A session on a freshly created schema, dropped afterwards."""
    create_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        drop_tables()


@pytest.fixture
def client():
    """TestClient with startup run (tables + default users), schema dropped afterwards."""
    from app.main import app
    with TestClient(app) as c:
        yield c
    drop_tables()


@pytest.fixture
def admin_client(client):
    client.auth = ADMIN
    return client
