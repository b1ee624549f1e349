"""
Integration tests for Exercises API endpoints.

Tests the /exercises/* lookups and /health against the seeded fake store.
"""
import pytest
from fastapi.testclient import TestClient

from application.constants import EXERCISES_COLLECTION
from backend.main import create_app
from backend.settings import Settings

pytestmark = pytest.mark.integration


class TestGetExercise:
    """Tests for GET /exercises/{exercise_id}."""

    def test_existing_exercise_returns_200(self, client, exercise_ids):
        response = client.get(f"/exercises/{exercise_ids['Bench Press']}")

        assert response.status_code == 200
        assert response.json() == {
            "id": exercise_ids["Bench Press"],
            "name": "Bench Press",
            "body_part": "chest",
        }

    def test_unknown_exercise_returns_404(self, client):
        response = client.get("/exercises/does-not-exist")

        assert response.status_code == 404

    def test_malformed_exercise_returns_404(self, client, seeded_store):
        seeded_store.seed(EXERCISES_COLLECTION, [{"id": "broken", "name": "", "body_part": "tail"}])

        response = client.get("/exercises/broken")

        assert response.status_code == 404

    def test_store_down_returns_503(self, client, seeded_store, exercise_ids):
        seeded_store.fail_on("get", EXERCISES_COLLECTION)

        response = client.get(f"/exercises/{exercise_ids['Squat']}")

        assert response.status_code == 503


class TestFindExerciseByName:
    """Tests for GET /exercises?name=."""

    def test_exact_name_returns_200(self, client, exercise_ids):
        response = client.get("/exercises", params={"name": "Leg Press"})

        assert response.status_code == 200
        assert response.json()["id"] == exercise_ids["Leg Press"]
        assert response.json()["body_part"] == "leg"

    def test_name_match_is_exact(self, client):
        response = client.get("/exercises", params={"name": "leg press"})

        assert response.status_code == 404

    def test_missing_name_returns_422(self, client):
        response = client.get("/exercises")

        assert response.status_code == 422

    def test_store_down_returns_503(self, client, seeded_store):
        seeded_store.fail_on("query", EXERCISES_COLLECTION)

        response = client.get("/exercises", params={"name": "Squat"})

        assert response.status_code == 503


class TestHealthAndWiring:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_no_store_returns_503(self, test_settings):
        app = create_app(settings=test_settings)
        app.state.document_store = None

        with TestClient(app) as no_store_client:
            response = no_store_client.get("/exercises/anything")

        assert response.status_code == 503

    def test_health_without_startup_seed(self, seeded_store):
        settings = Settings(
            environment="test", store_backend="memory", seed_on_startup=False, _env_file=None
        )
        app = create_app(settings=settings, store=seeded_store)

        with TestClient(app) as unseeded_client:
            response = unseeded_client.get("/health")

        assert response.status_code == 200
        assert seeded_store.calls == []
