"""
FastAPI Dependency Providers for the LiftLog API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) or store-agnostic repositories rather than
concrete adapters.

Architecture:
- Settings are cached per-process (lru_cache)
- The DocumentStore is built once by backend.main and kept on app.state
- Repository providers create new instances per-request (they hold no state)

Usage in routers:
    from api.deps import get_workout_log_repo
    from application.repositories import WorkoutLogRepository

    @router.post("/workout/get")
    def get_logs(repo: WorkoutLogRepository = Depends(get_workout_log_repo)):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_document_store] = lambda: FakeDocumentStore()
"""

from fastapi import Depends, HTTPException, Request

from application.ports import DocumentStore
from application.repositories import ExerciseCatalog, WorkoutLogRepository
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Store Provider
# =============================================================================


def get_document_store(request: Request) -> DocumentStore:
    """
    Get the process-wide DocumentStore.

    Raises HTTPException 503 if no store is configured.

    Returns:
        DocumentStore: Store built at application startup
    """
    store = getattr(request.app.state, "document_store", None)
    if store is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return store


# =============================================================================
# Repository Providers
# =============================================================================


def get_exercise_catalog(
    store: DocumentStore = Depends(get_document_store),
) -> ExerciseCatalog:
    """
    Get ExerciseCatalog over the configured store.

    Args:
        store: DocumentStore (injected)

    Returns:
        ExerciseCatalog: Read-only exercise lookups
    """
    return ExerciseCatalog(store)


def get_workout_log_repo(
    store: DocumentStore = Depends(get_document_store),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> WorkoutLogRepository:
    """
    Get WorkoutLogRepository over the configured store.

    Args:
        store: DocumentStore (injected)
        catalog: ExerciseCatalog used for the exercise reference check

    Returns:
        WorkoutLogRepository: Workout log persistence
    """
    return WorkoutLogRepository(store, catalog)


__all__ = [
    "get_settings",
    "get_document_store",
    "get_exercise_catalog",
    "get_workout_log_repo",
]
