"""
Tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
No database is needed: the lifespan does not run without a context manager.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import app

ENDPOINTS = [
    "/v1/accounts",
    "/v1/accounts/verification/resend",
    "/v1/accounts/verification",
    "/v1/accounts/privacy-policy",
    "/v1/accounts/pin",
    "/v1/accounts/biometric",
]


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

    def test_title_and_version(self, schema: dict) -> None:
        assert schema["info"]["title"] == "account-onboarding"
        assert "Onboarding" in schema["info"]["description"]
        assert schema["info"]["version"] == "0.1.0"

    @pytest.mark.parametrize("path", ENDPOINTS)
    def test_endpoint_documented_as_post(self, schema: dict, path: str) -> None:
        assert "post" in schema["paths"][path]
        assert "v1" in schema["paths"][path]["post"]["tags"]

    def test_register_summary(self, schema: dict) -> None:
        assert schema["paths"]["/v1/accounts"]["post"]["summary"] == "Register a new account"

    def test_register_request_uses_camel_case(self, schema: dict) -> None:
        props = schema["components"]["schemas"]["RegisterRequest"]["properties"]
        assert set(props) == {"customerName", "nationalId", "mobileNumber", "emailAddress"}

    def test_biometric_response_schema(self, schema: dict) -> None:
        props = schema["components"]["schemas"]["BiometricResponse"]["properties"]
        assert set(props) == {"message", "redirectTo"}

    def test_error_response_documented(self, schema: dict) -> None:
        responses = schema["paths"]["/v1/accounts/verification"]["post"]["responses"]
        assert "400" in responses
        props = schema["components"]["schemas"]["ErrorResponse"]["properties"]
        assert "message" in props
        assert "error" in props

    def test_v1_tag_in_schema(self, schema: dict) -> None:
        assert "v1" in [t["name"] for t in schema.get("tags", [])]


class TestSwaggerUI:
    """Tests for Swagger UI availability."""

    def test_docs_endpoint_accessible(self, client: TestClient) -> None:
        response = client.get("/docs")
        assert response.status_code == 200
        assert "swagger" in response.text.lower()
