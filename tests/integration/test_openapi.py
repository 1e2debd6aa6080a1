"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from prereg import __version__
from prereg.api.main import app

pytestmark = pytest.mark.integration


@pytest.fixture
def client() -> TestClient:
    """Create test client for the application."""
    return TestClient(app)


@pytest.fixture
def schema(client: TestClient) -> dict:
    response = client.get("/openapi.json")
    assert response.status_code == 200
    return response.json()


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_title_and_description(self, schema: dict) -> None:
        """OpenAPI schema has correct title, description and version."""
        assert schema["info"]["title"] == "prereg"
        assert "Pre-registration" in schema["info"]["description"]
        assert schema["info"]["version"] == __version__

    def test_reservation_endpoint_in_schema(self, schema: dict) -> None:
        """POST /api/reservation is documented."""
        assert "/api/reservation" in schema["paths"]
        operation = schema["paths"]["/api/reservation"]["post"]
        assert operation["summary"] == "Submit a pre-registration"
        assert "reservation" in operation.get("tags", [])

    def test_error_responses_documented(self, schema: dict) -> None:
        """400 and 500 responses use the error model."""
        responses = schema["paths"]["/api/reservation"]["post"]["responses"]
        assert {"200", "400", "500"} <= set(responses)

    def test_request_schema(self, schema: dict) -> None:
        """The request body exposes name, email and interests."""
        props = schema["components"]["schemas"]["ReservationForm"]["properties"]
        assert set(props) == {"name", "email", "interests"}

    def test_response_schema(self, schema: dict) -> None:
        """The success response has message and data."""
        props = schema["components"]["schemas"]["ReservationResponse"]["properties"]
        assert set(props) == {"message", "data"}

    def test_reservation_tag(self, schema: dict) -> None:
        """The reservation tag is defined."""
        assert "reservation" in [tag["name"] for tag in schema.get("tags", [])]


class TestServiceEndpoints:
    """Tests for health and documentation pages."""

    def test_health(self, client: TestClient) -> None:
        """Health check reports healthy."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_docs_endpoint_accessible(self, client: TestClient) -> None:
        """Swagger UI is accessible at /docs."""
        response = client.get("/docs")
        assert response.status_code == 200
        assert "swagger" in response.text.lower()
