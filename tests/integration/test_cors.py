"""Integration tests for the strict cross-origin policy."""

from __future__ import annotations

from unittest.mock import patch

import pytest

ALLOWED_ORIGIN = "http://localhost:5173"

pytestmark = pytest.mark.integration


class TestStrictOrigin:
    def test_allowed_origin_passes_with_cors_headers(self, api_client):
        response = api_client.get("/api/products", HTTP_ORIGIN=ALLOWED_ORIGIN)
        assert response.status_code == 200
        assert response["Access-Control-Allow-Origin"] == ALLOWED_ORIGIN

    def test_foreign_origin_rejected(self, api_client):
        response = api_client.get("/api/products", HTTP_ORIGIN="http://evil.example")
        assert response.status_code == 403
        assert response.json() == {"error": "Error de CORS"}
        assert "Access-Control-Allow-Origin" not in response

    def test_foreign_origin_never_reaches_handler(self, api_client):
        with patch(
            "modules.products.views.ProductService.create_product"
        ) as create_product:
            response = api_client.post(
                "/api/products",
                {"name": "Mouse", "price": "10"},
                HTTP_ORIGIN="http://evil.example",
            )
        assert response.status_code == 403
        create_product.assert_not_called()

    def test_origin_must_match_exactly(self, api_client):
        response = api_client.get(
            "/api/products", HTTP_ORIGIN=ALLOWED_ORIGIN + ".evil.example"
        )
        assert response.status_code == 403

    def test_preflight_from_foreign_origin_rejected(self, api_client):
        response = api_client.options(
            "/api/products",
            HTTP_ORIGIN="http://evil.example",
            HTTP_ACCESS_CONTROL_REQUEST_METHOD="POST",
        )
        assert response.status_code == 403

    def test_request_without_origin_passes(self, api_client):
        response = api_client.get("/api/products")
        assert response.status_code == 200

    def test_non_api_paths_are_not_guarded(self, client):
        response = client.get("/health", HTTP_ORIGIN="http://evil.example")
        assert response.status_code == 200
