"""
Shared pytest fixtures for LiftLog API tests.

Provides fake stores, repositories wired to them, and a TestClient whose
app uses the fake store.
"""

from typing import Dict, Generator, Tuple

import pytest
from fastapi.testclient import TestClient

from application.repositories import ExerciseCatalog, WorkoutLogRepository
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeDocumentStore, create_seeded_store


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> FakeDocumentStore:
    """Empty fake document store."""
    return FakeDocumentStore()


@pytest.fixture
def seeded() -> Tuple[FakeDocumentStore, Dict[str, str]]:
    """Fake store holding the default catalog, plus name -> id mapping."""
    return create_seeded_store()


@pytest.fixture
def seeded_store(seeded) -> FakeDocumentStore:
    return seeded[0]


@pytest.fixture
def exercise_ids(seeded) -> Dict[str, str]:
    return seeded[1]


# ---------------------------------------------------------------------------
# Repositories
# ---------------------------------------------------------------------------


@pytest.fixture
def catalog(seeded_store) -> ExerciseCatalog:
    return ExerciseCatalog(seeded_store)


@pytest.fixture
def log_repo(seeded_store, catalog) -> WorkoutLogRepository:
    return WorkoutLogRepository(seeded_store, catalog)


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with in-memory storage and no .env file."""
    return Settings(environment="test", store_backend="memory", _env_file=None)


@pytest.fixture
def client(test_settings, seeded_store) -> Generator[TestClient, None, None]:
    """TestClient for an app backed by the seeded fake store."""
    app = create_app(settings=test_settings, store=seeded_store)
    with TestClient(app) as test_client:
        yield test_client
