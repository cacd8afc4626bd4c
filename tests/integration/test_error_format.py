"""Every failure leaves the API as a JSON object with an ``error`` field."""

from unittest.mock import patch

import pytest

pytestmark = pytest.mark.integration


class TestErrorFormat:
    def test_not_authenticated(self, api_client):
        response = api_client.get("/api/delivery/1/")

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication credentials were not provided."}

    def test_malformed_json(self, auth_client):
        response = auth_client.post(
            "/api/delivery/cancel-delivery/",
            data="{not json",
            content_type="application/json",
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_method_not_allowed(self, auth_client):
        response = auth_client.get("/api/delivery/cancel-delivery/")

        assert response.status_code == 405
        assert "error" in response.json()

    def test_unexpected_error_is_generic(self, auth_client):
        with patch(
            "modules.deliveries.views.DeliveryService.track_delivery",
            side_effect=RuntimeError("secret internals"),
        ):
            response = auth_client.get("/api/delivery/1/")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
