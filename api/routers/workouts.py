"""
Workouts router for recording and fetching workout logs.

This router provides endpoints for:
- Fetching all workout logs of a user
- Recording a workout set against an existing exercise

Error mapping:
- invalid input / unknown exercise_id -> 400
- store unavailable -> 503
"""
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from api.deps import get_workout_log_repo
from application.exceptions import ErrorKind, StoreUnavailable
from application.repositories import InsertWorkoutLogResult, WorkoutLogRepository
from domain.models import WorkoutLog

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workout",
    tags=["Workouts"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class UserRequest(BaseModel):
    """Request body for fetching a user's logs."""
    user_id: Optional[str] = Field(None, description="User whose logs to fetch")


class WorkoutLogRequest(BaseModel):
    """
    Request body for recording a workout set.

    Values are range- and format-checked by the repository, so bad input
    answers 400 like every other rejected insert.
    """
    user_id: Optional[str] = Field(None, description="User recording the set")
    workout_date: Optional[str] = Field(None, description="Day of the workout (YYYY-MM-DD)")
    exercise_id: Optional[str] = Field(None, description="ID of an existing exercise")
    weight: Optional[float] = Field(None, description="Weight lifted")
    repetitions: Optional[int] = Field(None, description="Repetitions completed")
    rm: Optional[float] = Field(None, description="One-rep max (estimated if omitted)")


class WorkoutLogResponse(BaseModel):
    """Response model for a stored workout log."""
    id: str
    user_id: str
    workout_date: date
    exercise_id: str
    weight: Optional[float] = None
    repetitions: Optional[int] = None
    rm: Optional[float] = None

    @classmethod
    def from_log(cls, log: WorkoutLog) -> "WorkoutLogResponse":
        """Convert a WorkoutLog to response model."""
        return cls(**log.model_dump())


_STATUS_BY_ERROR = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION: 400,
    ErrorKind.STORE_UNAVAILABLE: 503,
}


def _raise_for_failure(result: InsertWorkoutLogResult) -> None:
    status_code = _STATUS_BY_ERROR.get(result.error_kind, 500)
    raise HTTPException(status_code=status_code, detail=result.error)


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/get", response_model=List[WorkoutLogResponse])
def get_workout_logs(
    request: UserRequest,
    repo: WorkoutLogRepository = Depends(get_workout_log_repo),
) -> List[WorkoutLogResponse]:
    """
    Fetch all workout logs recorded by a user.

    Returns an empty list for users without logs.
    """
    if not request.user_id:
        raise HTTPException(status_code=400, detail="user_id is required")

    try:
        logs = repo.list_by_user(request.user_id)
    except StoreUnavailable as e:
        logger.error("Error fetching workout logs for user_id=%s: %s", request.user_id, e.message)
        raise HTTPException(status_code=503, detail=f"Error fetching workout logs: {e.message}")

    return [WorkoutLogResponse.from_log(log) for log in logs]


@router.post("/insert", response_model=WorkoutLogResponse, status_code=201)
def insert_workout_log(
    request: WorkoutLogRequest,
    repo: WorkoutLogRepository = Depends(get_workout_log_repo),
) -> WorkoutLogResponse:
    """
    Record a workout set.

    The exercise_id must reference an existing exercise; the reference is
    checked before anything is written.
    """
    if not request.user_id:
        raise HTTPException(status_code=400, detail="user_id is required")
    if not request.workout_date:
        raise HTTPException(status_code=400, detail="workout_date is required")

    result = repo.insert(
        user_id=request.user_id,
        workout_date=request.workout_date,
        exercise_id=request.exercise_id or "",
        weight=request.weight,
        repetitions=request.repetitions,
        rm=request.rm,
    )
    if not result.success:
        _raise_for_failure(result)

    return WorkoutLogResponse.from_log(result.workout_log)
