"""
End-to-end tests for the FridgeChef API endpoints.

This test module verifies that:
1. POST /recipes/analyze returns recipes in the camelCase shape Streamlit parses
2. Generation failures map to 400/502/503 with the generic message
3. Request validation rejects unknown filters and empty images
4. /filters and /health report the expected payloads

The generation client is replaced through FastAPI dependency overrides.
"""

from unittest.mock import Mock, patch

import pytest
from fastapi.testclient import TestClient

from api.main import app, get_generation_client
from fridgechef.generation import GENERIC_ERROR_MESSAGE, GenerationFailure, GenerationResult
from fridgechef.ingestion import EncodedImage
from fridgechef.models import DietaryFilter


@pytest.fixture
def generation_client():
    """A stand-in RecipeGenerationClient whose generate() result tests set."""
    fake = Mock()
    fake.generate.return_value = GenerationResult.success([])
    app.dependency_overrides[get_generation_client] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    return TestClient(app)


class TestAnalyzeEndpoint:
    """Tests for POST /recipes/analyze."""

    def test_success_json_shape(self, client, generation_client, sample_recipes):
        """Test that recipes are returned with camelCase field names and local ids."""
        generation_client.generate.return_value = GenerationResult.success(sample_recipes)

        response = client.post(
            "/recipes/analyze",
            json={"image_base64": "AAAA", "mime_type": "image/jpeg", "filters": ["Vegan"]},
        )

        assert response.status_code == 200
        recipes = response.json()["recipes"]
        assert len(recipes) == 2

        recipe = recipes[0]
        assert recipe["id"] == "recipe-test-1"
        assert recipe["title"] == "Tomato Egg Stir-Fry"
        assert recipe["prepTimeMinutes"] == 15
        assert recipe["difficulty"] == "Easy"
        assert recipe["dietaryTags"] == ["Vegetarian"]
        assert recipe["ingredientsMissing"] == [{"name": "olive oil", "amount": "2 tbsp"}]
        assert recipe["steps"][0] == {"stepNumber": 1, "instruction": "Step 1 instruction."}

    def test_passes_image_and_filters(self, client, generation_client):
        client.post(
            "/recipes/analyze",
            json={"image_base64": "AAAA", "mime_type": "image/png", "filters": ["Keto", "Vegan"]},
        )

        generation_client.generate.assert_called_once_with(
            EncodedImage(data="AAAA", mime_type="image/png"),
            [DietaryFilter.KETO, DietaryFilter.VEGAN],
        )

    def test_data_url_prefix_stripped(self, client, generation_client):
        """Test that a data URL is reduced to its payload and its MIME type is used."""
        client.post("/recipes/analyze", json={"image_base64": "data:image/webp;base64,UklGRg=="})

        image, filters = generation_client.generate.call_args[0]
        assert image == EncodedImage(data="UklGRg==", mime_type="image/webp")
        assert filters == []

    def test_duplicate_filters_collapsed(self, client, generation_client):
        client.post("/recipes/analyze", json={"image_base64": "AAAA", "filters": ["Vegan", "Vegan"]})
        assert generation_client.generate.call_args[0][1] == [DietaryFilter.VEGAN]

    def test_missing_mime_defaults_to_jpeg(self, client, generation_client):
        client.post("/recipes/analyze", json={"image_base64": "AAAA"})
        assert generation_client.generate.call_args[0][0].mime_type == "image/jpeg"

    def test_empty_batch(self, client, generation_client):
        response = client.post("/recipes/analyze", json={"image_base64": "AAAA"})
        assert response.status_code == 200
        assert response.json() == {"recipes": []}

    @pytest.mark.parametrize("failure, status_code", [
        (GenerationFailure.REQUEST_FAILED, 502),
        (GenerationFailure.INVALID_RESPONSE, 502),
        (GenerationFailure.NOT_CONFIGURED, 503),
        (GenerationFailure.IMAGE_READ, 400),
    ])
    def test_failure_status_codes(self, client, generation_client, failure, status_code):
        """Test that failures carry the reason and only the generic message."""
        generation_client.generate.return_value = GenerationResult.failed(failure, "internal detail")

        response = client.post("/recipes/analyze", json={"image_base64": "AAAA"})

        assert response.status_code == status_code
        detail = response.json()["detail"]
        assert detail == {"reason": failure.value, "message": GENERIC_ERROR_MESSAGE}
        assert "internal detail" not in response.text

    def test_unknown_filter_rejected(self, client, generation_client):
        response = client.post("/recipes/analyze", json={"image_base64": "AAAA", "filters": ["Paleo"]})
        assert response.status_code == 422
        generation_client.generate.assert_not_called()

    def test_empty_image_rejected(self, client, generation_client):
        response = client.post("/recipes/analyze", json={"image_base64": ""})
        assert response.status_code == 422


class TestFiltersEndpoint:
    def test_lists_filters_in_display_order(self, client):
        response = client.get("/filters")
        assert response.status_code == 200
        assert response.json() == {
            "filters": ["Vegetarian", "Vegan", "Keto", "Gluten-Free", "Dairy-Free", "High-Protein"]
        }


class TestHealthEndpoint:
    """Tests for GET /health and GET /."""

    @patch.dict("os.environ", {"GEMINI_API_KEY": "test-key", "GEMINI_MODEL": "gemini-test"})
    def test_health_configured(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["name"] == "FridgeChef API"
        assert data["model"] == "gemini-test"
        assert data["api_key_configured"] is True
        assert isinstance(data["uptime_seconds"], int)
        assert data["uptime_seconds"] >= 0

    @patch.dict("os.environ", {}, clear=True)
    def test_health_without_key(self, client):
        data = client.get("/health").json()
        assert data["api_key_configured"] is False

    def test_root(self, client):
        data = client.get("/").json()
        assert data["name"] == "FridgeChef API"
        assert data["docs"] == "/docs"
