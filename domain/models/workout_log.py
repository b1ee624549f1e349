"""
WorkoutLog entity: one recorded set of an exercise.
"""

from datetime import date
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class WorkoutLog(BaseModel):
    """
    A single workout set recorded by a user.

    `exercise_id` must reference an existing Exercise at insert time. The
    reference is checked by WorkoutLogRepository, not by the store.

    Examples:
        >>> log = WorkoutLog(
        ...     user_id="user-1",
        ...     workout_date=date(2026, 10, 19),
        ...     exercise_id="abc123",
        ...     weight=80.0,
        ...     repetitions=5,
        ... )
        >>> log.to_document()["workout_date"]
        '2026-10-19'
    """

    id: Optional[str] = Field(default=None, description="Store-assigned document key")
    user_id: str = Field(..., min_length=1)
    workout_date: date
    exercise_id: str = Field(..., min_length=1)
    weight: Optional[float] = Field(default=None, ge=0)
    repetitions: Optional[int] = Field(default=None, ge=0)
    rm: Optional[float] = Field(default=None, ge=0, description="One-rep max")

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "WorkoutLog":
        """Build a WorkoutLog from a stored document (raises ValidationError)."""
        return cls.model_validate(doc)

    def to_document(self) -> Dict[str, Any]:
        """Fields persisted in the workout_logs collection (key excluded)."""
        return self.model_dump(mode="json", exclude={"id"})
