"""Correlation id propagation through API requests."""

import pytest

pytestmark = pytest.mark.integration


class TestCorrelationId:
    def test_request_id_echoed_on_api_response(self, api_client_with_correlation):
        client, cid = api_client_with_correlation

        response = client.post(
            "/api/users/",
            {
                "name": "Walid Chebbi",
                "email": "walid@example.com",
                "password": "s3cure-pass",
                "phone": "+216 98000111",
                "location": "Monastir",
                "role": "Client",
            },
            format="json",
        )

        assert response.status_code == 201
        assert response["X-Request-ID"] == cid

    def test_request_id_echoed_on_errors(self, api_client_with_correlation):
        client, cid = api_client_with_correlation

        response = client.get("/api/dashboard/")

        assert response.status_code == 401
        assert response["X-Request-ID"] == cid
