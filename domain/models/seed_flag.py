"""
SeedFlag: singleton marker recording that reference data was loaded.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

EXERCISE_INIT_FLAG = "exercise_data_initialized"


class SeedFlag(BaseModel):
    """
    Persisted initialization flag.

    Identity is the fixed document key, never an auto id. `initialized`
    flips from False to True once, after the catalog was written.
    """

    id: str = Field(default=EXERCISE_INIT_FLAG)
    flag_name: str = Field(default=EXERCISE_INIT_FLAG)
    initialized: bool = False

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "SeedFlag":
        """Build a SeedFlag from a stored document (raises ValidationError)."""
        return cls.model_validate(doc)

    def to_document(self) -> Dict[str, Any]:
        """Fields persisted in the initializationFlags collection."""
        return {"flag_name": self.flag_name, "initialized": self.initialized}
