"""
Fake implementations for testing.

This package provides in-memory fakes of the storage port for fast, isolated
testing. No database or external dependencies required.

Usage:
    from tests.fakes import FakeDocumentStore, create_seeded_store

    store = FakeDocumentStore()
    store, exercise_ids = create_seeded_store()
"""
from typing import Dict, Tuple

from application.constants import EXERCISES_COLLECTION
from domain.catalog import DEFAULT_EXERCISE_CATALOG
from tests.fakes.document_store import FakeDocumentStore


def create_seeded_store() -> Tuple[FakeDocumentStore, Dict[str, str]]:
    """
    Create a FakeDocumentStore holding the default exercise catalog.

    The call log is empty afterwards, so tests only see their own calls.

    Returns:
        (store, mapping of exercise name -> exercise id)
    """
    store = FakeDocumentStore()
    ids: Dict[str, str] = {}
    for name, body_part in DEFAULT_EXERCISE_CATALOG:
        exercise_id = name.lower().replace(" ", "-")
        store.seed(
            EXERCISES_COLLECTION,
            [{"id": exercise_id, "name": name, "body_part": body_part.value}],
        )
        ids[name] = exercise_id
    return store, ids


__all__ = [
    "FakeDocumentStore",
    "create_seeded_store",
]
