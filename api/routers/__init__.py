"""
Router package for the LiftLog API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- workouts: Workout log recording and listing
- exercises: Exercise catalog lookups
"""

from api.routers.health import router as health_router
from api.routers.workouts import router as workouts_router
from api.routers.exercises import router as exercises_router

__all__ = [
    "health_router",
    "workouts_router",
    "exercises_router",
]
