"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_openapi_schema_accessible(self, client: TestClient) -> None:
        """OpenAPI schema is accessible at /openapi.json."""
        response = client.get("/openapi.json")
        assert response.status_code == 200
        schema = response.json()
        assert "openapi" in schema
        assert "paths" in schema

    def test_openapi_title_and_version(self, client: TestClient) -> None:
        """OpenAPI schema has correct title and version."""
        schema = client.get("/openapi.json").json()
        assert schema["info"]["title"] == "payload-guard"
        assert schema["info"]["version"] == "0.1.0"

    @pytest.mark.parametrize(
        ("path", "method"),
        [
            ("/products", "post"),
            ("/products2", "post"),
            ("/products3", "post"),
            ("/products/{product_id}", "patch"),
            ("/signup", "get"),
            ("/signup", "post"),
            ("/signup/inline", "post"),
        ],
    )
    def test_endpoint_documented(self, client: TestClient, path: str, method: str) -> None:
        """Every route is documented."""
        schema = client.get("/openapi.json").json()
        assert method in schema["paths"][path]

    def test_validation_error_documented(self, client: TestClient) -> None:
        """Product routes document the 400 error shape."""
        schema = client.get("/openapi.json").json()
        responses = schema["paths"]["/products2"]["post"]["responses"]
        assert "400" in responses

    def test_products3_request_body_schema(self, client: TestClient) -> None:
        """The framework-validated route documents its body schema."""
        schema = client.get("/openapi.json").json()
        product = schema["components"]["schemas"]["ProductCreate"]
        assert set(product["required"]) == {"description", "price"}
