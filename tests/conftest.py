"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from shortlink.core.setting import Settings
from shortlink.main import create_app
from shortlink.services.slug_store import SlugStore
from shortlink.storage import FlatFileStorage

SECRET = "changeme"
SERVER_NAME = "http://localhost"


class RecordingStorage(FlatFileStorage):
    """Flat file storage that counts persist() calls."""

    def __init__(self, path: str):
        super().__init__(path)
        self.writes = 0

    def persist(self, mapping) -> bool:
        self.writes += 1
        return super().persist(mapping)


@pytest.fixture
def storage_path(tmp_path):
    """Storage file location inside a per-test directory (not created yet)."""
    return tmp_path / "shortlink.urls"


@pytest.fixture
def backend(storage_path):
    return RecordingStorage(str(storage_path))


@pytest.fixture
def store(backend):
    return SlugStore(backend, slug_length=5)


@pytest.fixture
def settings(storage_path):
    return Settings(
        SERVER_NAME=SERVER_NAME,
        SECRET=SECRET,
        SLUG_LENGTH=5,
        STORAGE_FILE=str(storage_path),
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with the application lifespan running (store loaded)."""
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
