"""
Application factory and bootstrap for FastAPI.

This module provides:
- create_app(): builds a FastAPI instance (routers, CORS, Sentry)
- build_document_store(): picks the DocumentStore adapter from settings
- bootstrap(): seeds the exercise catalog, then builds the app

Seeding is an explicit awaitable step run by the process bootstrap before
the HTTP layer accepts traffic, not a framework startup hook.

Usage:
    from backend.main import bootstrap, create_app
    from backend.settings import Settings

    # Production path (seeds first)
    app = await bootstrap()

    # Test app with custom settings and store
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings, store=InMemoryDocumentStore())
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool
from supabase import create_client

from application.ports import DocumentStore
from application.use_cases import SeedCoordinator, SeedResult
from backend.settings import Settings, get_settings
from domain.catalog import DEFAULT_EXERCISE_CATALOG
from infrastructure.db import InMemoryDocumentStore, SupabaseDocumentStore

logger = logging.getLogger(__name__)


class SeedingFailed(RuntimeError):
    """Startup seeding did not complete; the process must not serve traffic."""


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        store: Optional DocumentStore. If not provided, one is built from settings.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="LiftLog API",
        description="Strength-training workout log API",
        version="1.0.0",
    )

    _configure_cors(app, settings)

    app.state.settings = settings
    app.state.document_store = store if store is not None else build_document_store(settings)

    _include_routers(app)

    return app


def build_document_store(settings: Settings) -> Optional[DocumentStore]:
    """
    Build the DocumentStore adapter selected by settings.store_backend.

    Returns:
        DocumentStore, or None if Supabase credentials are not configured
    """
    if settings.store_backend == "memory":
        logger.warning("Using in-memory document store; data is lost on restart")
        return InMemoryDocumentStore()

    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("Supabase credentials not configured. Workout storage will be disabled.")
        return None

    return SupabaseDocumentStore(create_client(settings.supabase_url, settings.supabase_key))


async def seed_exercise_catalog(store: DocumentStore) -> SeedResult:
    """
    Ensure the default exercise catalog is present.

    The store client is synchronous, so the seed runs in a worker thread.

    Raises:
        SeedingFailed: If seeding did not complete
    """
    coordinator = SeedCoordinator(store)
    result = await run_in_threadpool(coordinator.ensure_seeded, DEFAULT_EXERCISE_CATALOG)
    if not result.success:
        raise SeedingFailed(f"Exercise catalog seeding failed: {result.error}")

    if result.already_initialized:
        logger.info("Exercise catalog already initialized")
    else:
        logger.info(
            "Exercise catalog seeded: %d added, %d already present",
            len(result.added),
            len(result.skipped),
        )
    return result


async def bootstrap(settings: Optional[Settings] = None) -> FastAPI:
    """
    Prepare the process to serve traffic.

    Builds the document store, seeds the exercise catalog (unless
    seed_on_startup is disabled) and only then creates the app.

    Raises:
        SeedingFailed: If seeding is enabled and did not complete
    """
    if settings is None:
        settings = get_settings()

    store = build_document_store(settings)

    if settings.seed_on_startup:
        if store is None:
            raise SeedingFailed("Cannot seed exercise catalog: no document store configured")
        await seed_exercise_catalog(store)
    else:
        logger.info("SEED_ON_STARTUP is disabled; skipping exercise catalog seed")

    return create_app(settings=settings, store=store)


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
            profiles_sample_rate=0.1,
            enable_tracing=True,
        )
        logger.info("Sentry initialized for liftlog-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    trusted_origins.extend(settings.cors_allowed_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        exercises_router,
        health_router,
        workouts_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    app.include_router(workouts_router)
    app.include_router(exercises_router)
