"""
API package for the LiftLog API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_document_store,
    get_exercise_catalog,
    get_workout_log_repo,
)

__all__ = [
    # Settings
    "get_settings",
    # Store
    "get_document_store",
    # Repositories
    "get_exercise_catalog",
    "get_workout_log_repo",
]
