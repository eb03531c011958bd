"""Integration tests for the API endpoints."""

import pytest
from fastapi.testclient import TestClient
from exercise_search.config import get_settings
from exercise_search.engine_instance import search_engine
from exercise_search.main import app


class TestAPI:
    """Integration tests for API endpoints against the bundled catalog."""

    @pytest.fixture
    def client(self):
        """Create a test client; entering it runs startup and loads the catalog."""
        with TestClient(app) as client:
            yield client

    @pytest.fixture
    def restore_catalog(self):
        """Reload the bundled catalog after a test that replaces it."""
        yield
        search_engine.catalog.load_json(get_settings().catalog_path)

    def test_root_endpoint(self, client):
        """Test the root endpoint."""
        response = client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "Exercise Search"
        assert data["version"] == "1.0.0"
        assert data["status"] == "running"
        assert "search" in data["endpoints"]

    def test_idle_search(self, client):
        """Test an empty query lists by popularity."""
        response = client.get("/api/v1/search")
        assert response.status_code == 200

        data = response.json()
        assert data["idle"] is True
        assert data["total_results"] == 32
        assert data["results"][0]["exercise"]["id"] == "ex-bench-press"
        assert all(r["match_type"] == "idle" for r in data["results"])

        scores = [r["score"] for r in data["results"]]
        assert scores == sorted(scores, reverse=True)

    def test_search_typo(self, client):
        """Test typo tolerance end to end."""
        response = client.get("/api/v1/search", params={"q": "bensh"})
        assert response.status_code == 200

        top = response.json()["results"][0]
        assert top["exercise"]["name"] == "Bench Press"
        assert top["match_type"] == "fuzzy"

    def test_search_equipment_preference(self, client):
        """Test that named equipment ranks matching equipment first."""
        response = client.get("/api/v1/search", params={"q": "dumbbell curl"})
        assert response.status_code == 200

        results = response.json()["results"]
        assert results[0]["exercise"]["id"] == "ex-db-bicep-curl"
        assert results[0]["exercise"]["equipment"] == "Dumbbell"

        barbell = next(r for r in results if r["exercise"]["id"] == "ex-barbell-curl")
        assert barbell["score"] < results[0]["score"]

    def test_search_with_query_filters(self, client):
        """Test filters passed as query parameters."""
        response = client.get("/api/v1/search", params={"q": "curl", "difficulty": "Intermediate"})
        assert response.status_code == 200

        data = response.json()
        assert data["total_results"] == 1
        assert data["results"][0]["exercise"]["name"] == "Preacher Curl"

    def test_search_with_repeated_filter_values(self, client):
        """Test list filters accept repeated parameters."""
        response = client.get(
            "/api/v1/search",
            params=[("muscle_groups", "biceps"), ("muscle_groups", "forearms")]
        )
        assert response.status_code == 200

        for result in response.json()["results"]:
            worked = [m.lower() for m in result["exercise"]["primary_muscles"] + result["exercise"]["secondary_muscles"]]
            assert "biceps" in worked
            assert "forearms" in worked

    def test_search_max_results(self, client):
        """Test truncation with the full total reported."""
        response = client.get("/api/v1/search", params={"max_results": 5})
        assert response.status_code == 200

        data = response.json()
        assert len(data["results"]) == 5
        assert data["total_results"] == 32

    def test_search_post(self, client):
        """Test search with a request body."""
        request_data = {
            "query": "row",
            "filters": {"equipment": ["cable"]},
            "max_results": 10
        }

        response = client.post("/api/v1/search", json=request_data)
        assert response.status_code == 200

        results = response.json()["results"]
        assert [r["exercise"]["id"] for r in results] == ["ex-seated-cable-row", "ex-tricep-pushdown"]
        assert all(r["exercise"]["equipment"] == "Cable" for r in results)

    def test_search_suggestions(self, client):
        """Test "did you mean" names for an empty result."""
        response = client.get("/api/v1/search", params={"q": "squat", "category": "Calves"})
        assert response.status_code == 200

        data = response.json()
        assert data["total_results"] == 0
        assert "Squat" in data["suggestions"]

    def test_search_query_too_long(self, client):
        """Test query length validation."""
        response = client.get("/api/v1/search", params={"q": "a" * 101})
        assert response.status_code == 400

        response = client.post("/api/v1/search", json={"query": "a" * 101})
        assert response.status_code == 422

    def test_search_invalid_max_results(self, client):
        """Test max_results bounds."""
        response = client.get("/api/v1/search", params={"q": "squat", "max_results": 0})
        assert response.status_code == 422

    def test_filter_options(self, client):
        """Test label counts."""
        response = client.get("/api/v1/filters")
        assert response.status_code == 200

        data = response.json()
        assert data["difficulty"] == {"Intermediate": 10, "Beginner": 19, "Advanced": 3}
        assert data["equipment"]["Cable"] == 5
        assert "Biceps" in data["muscles"]

    def test_match_name(self, client):
        """Test single name resolution."""
        response = client.get("/api/v1/match/Barbell Squat")
        assert response.status_code == 200

        data = response.json()
        assert data["name"] == "Barbell Squat"
        assert data["exercise"]["id"] == "ex-squat"

    def test_match_name_not_found(self, client):
        """Test an unresolvable name."""
        response = client.get("/api/v1/match/Glorbnaxx")
        assert response.status_code == 404

    def test_match_batch(self, client):
        """Test batch name resolution."""
        response = client.post(
            "/api/v1/match/batch",
            json={"names": ["Bench Press", "Glorbnaxx", "Romanian Deadlifts"]}
        )
        assert response.status_code == 200

        data = response.json()
        assert data["matches"] == {
            "Bench Press": "ex-bench-press",
            "Romanian Deadlifts": "ex-romanian-deadlift"
        }
        assert data["unresolved"] == ["Glorbnaxx"]
        assert data["total_resolved"] == 2

    def test_match_batch_validation(self, client):
        """Test batch request validation."""
        assert client.post("/api/v1/match/batch", json={"names": []}).status_code == 422
        assert client.post("/api/v1/match/batch", json={"names": ["  "]}).status_code == 422

    def test_list_exercises(self, client):
        """Test listing the catalog."""
        response = client.get("/api/v1/exercises")
        assert response.status_code == 200

        data = response.json()
        assert len(data) == 32
        assert data[0]["id"] == "ex-bench-press"

    def test_get_exercise(self, client):
        """Test fetching one exercise."""
        response = client.get("/api/v1/exercises/ex-plank")
        assert response.status_code == 200
        assert response.json()["name"] == "Plank"

        response = client.get("/api/v1/exercises/ex-missing")
        assert response.status_code == 404

    def test_load_exercises(self, client, restore_catalog):
        """Test replacing the catalog."""
        exercises = [
            {
                "id": "custom-1",
                "name": "Landmine Press",
                "category": "Shoulders",
                "equipment": "Barbell",
                "difficulty": "Intermediate",
                "primary_muscles": ["Shoulders"],
                "secondary_muscles": ["Triceps"],
                "is_custom": True
            }
        ]

        response = client.post("/api/v1/exercises", json=exercises)
        assert response.status_code == 200
        assert response.json()["total_exercises"] == 1

        response = client.get("/api/v1/search", params={"q": "landmine"})
        assert response.json()["results"][0]["exercise"]["id"] == "custom-1"

    def test_load_exercises_rejects_duplicates(self, client):
        """Test duplicate ids are rejected and the catalog is kept."""
        record = {
            "id": "dup",
            "name": "Dips",
            "category": "Triceps",
            "equipment": "Bodyweight",
            "difficulty": "Beginner",
            "primary_muscles": ["Triceps"],
            "secondary_muscles": []
        }

        response = client.post("/api/v1/exercises", json=[record, record])
        assert response.status_code == 400

        assert len(client.get("/api/v1/exercises").json()) == 32

    def test_load_exercises_rejects_invalid(self, client):
        """Test malformed exercises are rejected."""
        response = client.post("/api/v1/exercises", json=[{"id": "x", "name": "Dips"}])
        assert response.status_code == 400

    def test_health_check(self, client):
        """Test health check endpoint."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["catalog_size"] == 32
        assert "uptime" in data
        assert "dependencies" in data

    def test_health_degraded_when_empty(self, client, restore_catalog):
        """Test an empty catalog reports degraded and not ready."""
        search_engine.catalog.clear()

        assert client.get("/api/v1/health").json()["status"] == "degraded"
        assert client.get("/api/v1/health/ready").status_code == 503

    def test_readiness_check(self, client):
        """Test readiness check endpoint."""
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "ready"
        assert data["catalog_size"] == 32

    def test_liveness_check(self, client):
        """Test liveness check endpoint."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_service_status(self, client):
        """Test service status endpoint."""
        client.get("/api/v1/search", params={"q": "squat"})

        response = client.get("/api/v1/status")
        assert response.status_code == 200

        data = response.json()
        assert data["service"]["name"] == "Exercise Search"
        assert data["configuration"]["max_results"] == 50
        assert data["statistics"]["total_queries"] >= 1
