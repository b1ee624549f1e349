"""
Exercise reference entity.

Exercises form the catalog every workout log points at. They are created by
the startup seed and never mutated afterwards.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class BodyPart(str, Enum):
    """Body part an exercise primarily trains."""

    ARM = "arm"
    SHOULDER = "shoulder"
    CHEST = "chest"
    BACK = "back"
    LEG = "leg"
    ABS = "abs"


class Exercise(BaseModel):
    """
    An entry in the exercise catalog.

    Examples:
        >>> exercise = Exercise(name="Bench Press", body_part=BodyPart.CHEST)
        >>> exercise.to_document()
        {'name': 'Bench Press', 'body_part': 'chest'}
    """

    id: Optional[str] = Field(default=None, description="Store-assigned document key")
    name: str = Field(..., min_length=1, description="Unique exercise name")
    body_part: BodyPart = Field(..., description="Primary body part trained")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject whitespace-only names."""
        if not v.strip():
            raise ValueError("Exercise name must not be blank")
        return v

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Exercise":
        """Build an Exercise from a stored document (raises ValidationError)."""
        return cls.model_validate(doc)

    def to_document(self) -> Dict[str, Any]:
        """Fields persisted in the exercises collection (key excluded)."""
        return {"name": self.name, "body_part": self.body_part.value}
