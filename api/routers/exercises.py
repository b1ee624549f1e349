"""
Exercises router for catalog lookups.

This router provides endpoints for:
- Looking up an exercise by ID
- Looking up an exercise by exact name
"""
from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel

from api.deps import get_exercise_catalog
from application.exceptions import StoreUnavailable
from application.repositories import ExerciseCatalog
from domain.models import BodyPart, Exercise

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


class ExerciseResponse(BaseModel):
    """Response model for a single exercise."""
    id: str
    name: str
    body_part: BodyPart

    @classmethod
    def from_exercise(cls, exercise: Exercise) -> "ExerciseResponse":
        return cls(id=exercise.id, name=exercise.name, body_part=exercise.body_part)


@router.get("", response_model=ExerciseResponse)
def find_exercise_by_name(
    name: str = Query(..., min_length=1, description="Exact exercise name"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> ExerciseResponse:
    """Find an exercise by exact name."""
    try:
        exercise = catalog.find_by_name(name)
    except StoreUnavailable as e:
        raise HTTPException(status_code=503, detail=e.message)

    if exercise is None:
        raise HTTPException(status_code=404, detail=f"Exercise not found: {name}")
    return ExerciseResponse.from_exercise(exercise)


@router.get("/{exercise_id}", response_model=ExerciseResponse)
def get_exercise(
    exercise_id: str = Path(..., description="Exercise ID"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> ExerciseResponse:
    """Get an exercise by ID."""
    try:
        exercise = catalog.get(exercise_id)
    except StoreUnavailable as e:
        raise HTTPException(status_code=503, detail=e.message)

    if exercise is None:
        raise HTTPException(status_code=404, detail=f"Exercise not found: {exercise_id}")
    return ExerciseResponse.from_exercise(exercise)
