"""
Application Use Cases for the LiftLog API.

This package contains application-level use cases that orchestrate domain
logic and coordinate between ports/adapters.

Usage:
    from application.use_cases import SeedCoordinator
    from domain.catalog import DEFAULT_EXERCISE_CATALOG

    result = SeedCoordinator(store).ensure_seeded(DEFAULT_EXERCISE_CATALOG)
    if not result.success:
        raise SystemExit(result.error)
"""

from application.use_cases.seed_exercises import SeedCoordinator, SeedResult

__all__ = [
    "SeedCoordinator",
    "SeedResult",
]
