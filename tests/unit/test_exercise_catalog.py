"""
Unit tests for ExerciseCatalog.

Tests for:
- exists() / get() / find_by_name() against a fake store
- Malformed documents treated as missing
- Read-through behaviour (no caching)
"""

import logging

import pytest

from application.constants import EXERCISES_COLLECTION
from application.exceptions import StoreUnavailable
from application.repositories import ExerciseCatalog
from domain.models import BodyPart, Exercise


@pytest.mark.unit
class TestExists:
    """Tests for ExerciseCatalog.exists()."""

    def test_existing_exercise(self, catalog, exercise_ids):
        assert catalog.exists(exercise_ids["Bench Press"]) is True

    def test_missing_exercise(self, catalog):
        assert catalog.exists("does-not-exist") is False

    @pytest.mark.parametrize("exercise_id", ["", "   "])
    def test_blank_id_does_not_hit_store(self, catalog, seeded_store, exercise_id):
        seeded_store.calls.clear()

        assert catalog.exists(exercise_id) is False
        assert seeded_store.calls == []

    def test_malformed_document_is_missing(self, catalog, seeded_store, caplog):
        """A stored exercise that fails to parse counts as non-existent."""
        seeded_store.seed(
            EXERCISES_COLLECTION,
            [{"id": "bad", "name": "Plank", "body_part": "core"}],
        )

        with caplog.at_level(logging.WARNING):
            assert catalog.exists("bad") is False

        assert "malformed" in caplog.text.lower()

    def test_no_caching(self, catalog, seeded_store, exercise_ids):
        """Every call reads the store."""
        seeded_store.calls.clear()

        catalog.exists(exercise_ids["Squat"])
        catalog.exists(exercise_ids["Squat"])

        assert seeded_store.call_count("get", EXERCISES_COLLECTION) == 2

    def test_store_failure_propagates(self, catalog, seeded_store, exercise_ids):
        """A store outage is not confused with "not found"."""
        seeded_store.fail_on("get", EXERCISES_COLLECTION)

        with pytest.raises(StoreUnavailable):
            catalog.exists(exercise_ids["Squat"])


@pytest.mark.unit
class TestGet:
    """Tests for ExerciseCatalog.get()."""

    def test_returns_exercise_with_id(self, catalog, exercise_ids):
        exercise = catalog.get(exercise_ids["Lat Pulldown"])

        assert isinstance(exercise, Exercise)
        assert exercise.id == exercise_ids["Lat Pulldown"]
        assert exercise.name == "Lat Pulldown"
        assert exercise.body_part == BodyPart.BACK

    def test_missing_returns_none(self, catalog):
        assert catalog.get("nope") is None


@pytest.mark.unit
class TestFindByName:
    """Tests for ExerciseCatalog.find_by_name()."""

    def test_exact_match(self, catalog, exercise_ids):
        exercise = catalog.find_by_name("Shoulder Press")

        assert exercise is not None
        assert exercise.id == exercise_ids["Shoulder Press"]
        assert exercise.body_part == BodyPart.SHOULDER

    def test_match_is_case_sensitive(self, catalog):
        assert catalog.find_by_name("shoulder press") is None

    def test_unknown_name(self, catalog):
        assert catalog.find_by_name("Cable Fly") is None

    def test_uses_limit_one_query(self, catalog, seeded_store):
        seeded_store.calls.clear()

        catalog.find_by_name("Squat")

        assert seeded_store.calls == [("query", EXERCISES_COLLECTION)]

    def test_store_failure_propagates(self, catalog, seeded_store):
        seeded_store.fail_on("query")

        with pytest.raises(StoreUnavailable):
            catalog.find_by_name("Squat")


@pytest.mark.unit
def test_empty_store(store):
    catalog = ExerciseCatalog(store)

    assert catalog.exists("anything") is False
    assert catalog.find_by_name("Squat") is None
