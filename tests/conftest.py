# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from webloom.config import Settings
from webloom.database.connection import SubmissionStore
from webloom.main import create_app


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://")


@pytest.fixture
def store():
    """In-memory SQLite store with the table already created."""
    store = SubmissionStore.from_url("sqlite://")
    store.ensure_schema()
    yield store
    store.close()


@pytest.fixture
def broken_store(tmp_path):
    """Store pointing at a database file that can never be opened."""
    store = SubmissionStore.from_url(f"sqlite:///{tmp_path / 'missing' / 'webloom.db'}")
    yield store
    store.close()


@pytest.fixture
def client(settings, store):
    """Test client whose app uses the in-memory store."""
    app = create_app(settings=settings, store=store)
    with TestClient(app) as c:
        yield c
