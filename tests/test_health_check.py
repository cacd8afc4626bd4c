from unittest.mock import MagicMock, patch

from django.db import OperationalError


class TestHealthCheck:
    def test_reports_ok_with_every_probe_up(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "timestamp" in data
        for service in ("database", "cache"):
            assert data["services"][service]["status"] == "up"
            assert "response_time_ms" in data["services"][service]

    def test_trailing_slash_is_accepted(self, client):
        assert client.get("/health/").status_code == 200

    def test_needs_no_token(self, api_client):
        assert api_client.get("/health").status_code == 200

    def test_database_down_is_503(self, client):
        failing = MagicMock(side_effect=OperationalError("connection refused"))
        with patch.dict("modules.core.views.PROBES", {"database": failing}):
            response = client.get("/health")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["services"]["database"] == {"status": "down"}
        assert data["services"]["cache"]["status"] == "up"
