"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

from fastapi import APIRouter

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    When SEED_ON_STARTUP is enabled, the process only starts serving after
    the exercise catalog is seeded, so a response also means seeding
    completed. With seeding disabled it reports liveness only.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}
