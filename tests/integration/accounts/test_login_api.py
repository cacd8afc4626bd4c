"""Integration tests for the credential endpoints.

Covers:
- POST /api/users/login/ (public)
- POST /api/users/reset-password/
"""

import pytest

pytestmark = pytest.mark.integration

LOGIN_URL = "/api/users/login/"
RESET_URL = "/api/users/reset-password/"


class TestLogin:
    def test_success_returns_profile(self, api_client, customer):
        response = api_client.post(
            LOGIN_URL,
            {"email": "amira@example.com", "password": "password123"},
            format="json",
        )

        assert response.status_code == 200
        assert response.json() == {
            "message": "Login successful",
            "user": {
                "id": customer.id,
                "name": "Amira Ben Salah",
                "email": "amira@example.com",
                "phone": "+216 20000000",
                "location": "Tunis",
                "role": "Client",
            },
        }

    def test_wrong_password(self, api_client, customer):
        response = api_client.post(
            LOGIN_URL,
            {"email": "amira@example.com", "password": "wrong-password"},
            format="json",
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_unknown_email(self, api_client):
        response = api_client.post(
            LOGIN_URL,
            {"email": "ghost@example.com", "password": "password123"},
            format="json",
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_missing_fields(self, api_client):
        response = api_client.post(LOGIN_URL, {}, format="json")

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: email, password"}

    def test_registered_user_can_log_in(self, api_client):
        api_client.post(
            "/api/users/",
            {
                "name": "Salma Gharbi",
                "email": "salma@example.com",
                "password": "s3cure-pass",
                "phone": "+216 55000111",
                "location": "Sousse",
                "role": "Client",
            },
            format="json",
        )

        response = api_client.post(
            LOGIN_URL,
            {"email": "salma@example.com", "password": "s3cure-pass"},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "salma@example.com"


class TestResetPassword:
    def test_new_password_works_for_login(self, auth_client, api_client, customer):
        response = auth_client.post(
            RESET_URL,
            {"email": "amira@example.com", "newPassword": "another-pass"},
            format="json",
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Password reset successful"}
        old = api_client.post(
            LOGIN_URL,
            {"email": "amira@example.com", "password": "password123"},
            format="json",
        )
        new = api_client.post(
            LOGIN_URL,
            {"email": "amira@example.com", "password": "another-pass"},
            format="json",
        )
        assert old.status_code == 401
        assert new.status_code == 200

    def test_unknown_email(self, auth_client):
        response = auth_client.post(
            RESET_URL,
            {"email": "ghost@example.com", "newPassword": "another-pass"},
            format="json",
        )

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_missing_fields(self, auth_client):
        response = auth_client.post(RESET_URL, {}, format="json")

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: email, newPassword"}

    def test_requires_authentication(self, api_client, customer):
        response = api_client.post(
            RESET_URL,
            {"email": "amira@example.com", "newPassword": "another-pass"},
            format="json",
        )

        assert response.status_code == 401
