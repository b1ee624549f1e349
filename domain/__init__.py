"""
Domain layer for the LiftLog API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    BodyPart,
    Exercise,
    EXERCISE_INIT_FLAG,
    SeedFlag,
    WorkoutLog,
)

__all__ = [
    "BodyPart",
    "Exercise",
    "EXERCISE_INIT_FLAG",
    "SeedFlag",
    "WorkoutLog",
]
