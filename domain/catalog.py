"""
Default exercise catalog loaded at startup.

Order matters only for logging; every entry is seeded exactly once by name.
"""
from typing import List, NamedTuple

from domain.models.exercise import BodyPart


class CatalogEntry(NamedTuple):
    """A (name, body_part) pair to seed."""

    name: str
    body_part: BodyPart


DEFAULT_EXERCISE_CATALOG: List[CatalogEntry] = [
    CatalogEntry("Bench Press", BodyPart.CHEST),
    CatalogEntry("Incline Press", BodyPart.CHEST),
    CatalogEntry("Shoulder Press", BodyPart.SHOULDER),
    CatalogEntry("Lateral Raise", BodyPart.SHOULDER),
    CatalogEntry("Arm Curl", BodyPart.ARM),
    CatalogEntry("Lat Pulldown", BodyPart.BACK),
    CatalogEntry("Deadlift", BodyPart.BACK),
    CatalogEntry("Squat", BodyPart.LEG),
    CatalogEntry("Leg Press", BodyPart.LEG),
    CatalogEntry("Leg Extension", BodyPart.LEG),
    CatalogEntry("Leg Curl", BodyPart.LEG),
    CatalogEntry("Abdominal", BodyPart.ABS),
    CatalogEntry("Dumbbell Press", BodyPart.CHEST),
    CatalogEntry("Chest Incline Press", BodyPart.CHEST),
]
