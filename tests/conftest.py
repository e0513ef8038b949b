# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Sets environment defaults before the application is imported (settings
# are read once at import time) and provides fixtures shared by all tests.
# =============================================================================

import os

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from contacts_api.app.core import db
from contacts_api.app.main import create_app


@pytest.fixture
def app():
    """A freshly built application."""
    return create_app()


@pytest.fixture
def client(app):
    """Test client with the lifespan running, so the store starts empty."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(client):
    """The store backing ``client``."""
    return db.get_store()


@pytest.fixture
def alice_payload():
    return {"Name": "Alice", "CountryCode": "+1", "PhoneNumber": "5551234"}
