"""
Domain models for the LiftLog API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services):
- Exercise: catalog entry referenced by workout logs
- WorkoutLog: one recorded set
- SeedFlag: singleton marker for the startup seed

Usage:
    >>> from domain.models import Exercise, BodyPart

    >>> exercise = Exercise(name="Squat", body_part=BodyPart.LEG)
    >>> exercise.to_document()
    {'name': 'Squat', 'body_part': 'leg'}
"""

from domain.models.exercise import BodyPart, Exercise
from domain.models.seed_flag import EXERCISE_INIT_FLAG, SeedFlag
from domain.models.workout_log import WorkoutLog

__all__ = [
    "BodyPart",
    "Exercise",
    "EXERCISE_INIT_FLAG",
    "SeedFlag",
    "WorkoutLog",
]
