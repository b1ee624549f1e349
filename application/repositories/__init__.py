"""
Store-agnostic repositories for the LiftLog API.

These repositories are written against the DocumentStore port and hold no
state between calls: every check re-reads the store.
"""

from application.repositories.exercise_catalog import ExerciseCatalog
from application.repositories.workout_log_repository import (
    InsertWorkoutLogResult,
    WorkoutLogRepository,
)

__all__ = [
    "ExerciseCatalog",
    "InsertWorkoutLogResult",
    "WorkoutLogRepository",
]
