"""
ExerciseCatalog: read-only accessor over the exercises collection.

Pure read-through to the store with no caching, so concurrent seeding or
admin changes are always visible. "Not found" is a normal outcome; store
communication failures propagate as StoreUnavailable.
"""
import logging
from typing import Optional

from application.constants import EXERCISES_COLLECTION
from application.exceptions import MalformedRecord
from application.ports import DocumentStore
from application.repositories.documents import parse_document
from domain.models import Exercise

logger = logging.getLogger(__name__)


class ExerciseCatalog:
    """
    Lookup operations over the exercise catalog.

    Usage:
        >>> catalog = ExerciseCatalog(store)
        >>> catalog.exists("abc123")
        True
        >>> catalog.find_by_name("Squat")
        Exercise(id='abc123', name='Squat', body_part=<BodyPart.LEG: 'leg'>)
    """

    def __init__(self, store: DocumentStore):
        """
        Initialize with a document store.

        Args:
            store: DocumentStore implementation (injected)
        """
        self._store = store

    def exists(self, exercise_id: str) -> bool:
        """
        Check whether an exercise with the given ID exists.

        A stored document that cannot be parsed as an Exercise counts as
        missing and is logged as a data-quality warning.

        Args:
            exercise_id: Exercise document key

        Returns:
            True if a well-formed exercise is stored under exercise_id
        """
        return self.get(exercise_id) is not None

    def get(self, exercise_id: str) -> Optional[Exercise]:
        """
        Get an exercise by ID.

        Args:
            exercise_id: Exercise document key

        Returns:
            Exercise or None if not found (or malformed)
        """
        if not exercise_id or not exercise_id.strip():
            return None

        doc = self._store.get(EXERCISES_COLLECTION, exercise_id)
        if doc is None:
            return None
        return self._parse(doc)

    def find_by_name(self, name: str) -> Optional[Exercise]:
        """
        Find an exercise by exact name.

        Args:
            name: Exercise name (case-sensitive exact match)

        Returns:
            Exercise or None if not found (or malformed)
        """
        docs = self._store.query(EXERCISES_COLLECTION, "name", name, limit=1)
        if not docs:
            return None
        return self._parse(docs[0])

    def _parse(self, doc) -> Optional[Exercise]:
        try:
            return parse_document(Exercise.from_document, EXERCISES_COLLECTION, doc)
        except MalformedRecord as e:
            logger.warning("Ignoring malformed exercise: %s", e.message)
            return None
