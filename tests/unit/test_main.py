"""
Unit tests for backend/main.py
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI

from application.constants import EXERCISES_COLLECTION, FLAGS_COLLECTION
from backend.main import (
    SeedingFailed,
    _init_sentry,
    bootstrap,
    build_document_store,
    create_app,
    seed_exercise_catalog,
)
from backend.settings import Settings
from domain.models import EXERCISE_INIT_FLAG
from infrastructure.db import InMemoryDocumentStore, SupabaseDocumentStore
from tests.fakes import FakeDocumentStore


def _settings(**overrides) -> Settings:
    values = {"environment": "test", "store_backend": "memory", "_env_file": None}
    values.update(overrides)
    return Settings(**values)


@pytest.mark.unit
class TestCreateApp:
    """Test the create_app() factory function."""

    def test_create_app_returns_fastapi_instance(self):
        app = create_app(settings=_settings())
        assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self):
        app = create_app(settings=_settings())

        assert app.title == "LiftLog API"
        assert app.version == "1.0.0"

    def test_create_app_keeps_given_store(self):
        store = FakeDocumentStore()
        app = create_app(settings=_settings(), store=store)

        assert app.state.document_store is store

    def test_create_app_builds_store_from_settings(self):
        app = create_app(settings=_settings())

        assert isinstance(app.state.document_store, InMemoryDocumentStore)

    def test_create_app_uses_default_settings_when_none_provided(self):
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_get_settings.return_value = _settings()

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_routes_registered(self):
        app = create_app(settings=_settings())
        paths = set(app.openapi()["paths"])

        assert "/health" in paths
        assert "/workout/get" in paths
        assert "/workout/insert" in paths
        assert "/exercises/{exercise_id}" in paths


@pytest.mark.unit
class TestBuildDocumentStore:
    """Test build_document_store()."""

    def test_memory_backend(self):
        assert isinstance(build_document_store(_settings()), InMemoryDocumentStore)

    def test_supabase_without_credentials_returns_none(self):
        settings = _settings(store_backend="supabase", supabase_url=None, supabase_anon_key=None)

        assert build_document_store(settings) is None

    def test_supabase_with_credentials(self):
        settings = _settings(
            store_backend="supabase",
            supabase_url="https://test.supabase.co",
            supabase_service_role_key="test-key",
        )

        with patch("backend.main.create_client") as mock_create_client:
            mock_create_client.return_value = MagicMock()
            store = build_document_store(settings)

        mock_create_client.assert_called_once_with("https://test.supabase.co", "test-key")
        assert isinstance(store, SupabaseDocumentStore)


@pytest.mark.unit
class TestSeedExerciseCatalog:
    """Test the awaitable startup seed."""

    @pytest.mark.asyncio
    async def test_seeds_store(self):
        store = FakeDocumentStore()

        result = await seed_exercise_catalog(store)

        assert result.success is True
        assert store.count(EXERCISES_COLLECTION) == 14
        assert store.get(FLAGS_COLLECTION, EXERCISE_INIT_FLAG)["initialized"] is True

    @pytest.mark.asyncio
    async def test_raises_on_failure(self):
        store = FakeDocumentStore()
        store.fail_on("batch_write")

        with pytest.raises(SeedingFailed):
            await seed_exercise_catalog(store)


@pytest.mark.unit
class TestBootstrap:
    """Test bootstrap(): seed first, then build the app."""

    @pytest.mark.asyncio
    async def test_seeds_before_returning_app(self):
        store = FakeDocumentStore()

        with patch("backend.main.build_document_store", return_value=store):
            app = await bootstrap(_settings())

        assert app.state.document_store is store
        assert store.count(EXERCISES_COLLECTION) == 14

    @pytest.mark.asyncio
    async def test_failed_seed_does_not_build_app(self):
        store = FakeDocumentStore()
        store.fail_on("get", FLAGS_COLLECTION)

        with patch("backend.main.build_document_store", return_value=store), \
                patch("backend.main.create_app") as mock_create_app:
            with pytest.raises(SeedingFailed):
                await bootstrap(_settings())

        mock_create_app.assert_not_called()

    @pytest.mark.asyncio
    async def test_seed_can_be_disabled(self):
        store = FakeDocumentStore()

        with patch("backend.main.build_document_store", return_value=store):
            app = await bootstrap(_settings(seed_on_startup=False))

        assert isinstance(app, FastAPI)
        assert store.calls == []

    @pytest.mark.asyncio
    async def test_missing_store_fails_when_seeding(self):
        settings = _settings(store_backend="supabase")

        with patch("backend.main.build_document_store", return_value=None):
            with pytest.raises(SeedingFailed):
                await bootstrap(settings)


@pytest.mark.unit
class TestInitSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self):
        settings = _settings(sentry_dsn=None)

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_when_dsn_provided(self):
        settings = _settings(sentry_dsn="https://test@sentry.io/123")

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once()
            assert mock_init.call_args.kwargs["dsn"] == "https://test@sentry.io/123"
            assert mock_init.call_args.kwargs["environment"] == "test"
