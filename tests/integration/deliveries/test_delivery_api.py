"""Integration tests for the delivery lifecycle endpoints.

Covers:
- POST /api/delivery/cancel-delivery/
- GET  /api/delivery/{order_id}/
- POST /api/delivery/{order_id}/update-status/
- POST /api/delivery/{order_id}/assign-driver/
"""

import pytest

from modules.deliveries.models import Delivery

pytestmark = pytest.mark.integration

CANCEL_URL = "/api/delivery/cancel-delivery/"


def _status_url(order):
    return f"/api/delivery/{order.id}/update-status/"


def _advance(client, order, *statuses):
    for status in statuses:
        response = client.post(_status_url(order), {"newStatus": status}, format="json")
        assert response.status_code == 200, response.json()


class TestCancelDelivery:
    def test_cancels_order_and_delivery(self, auth_client, make_order):
        order = make_order()

        response = auth_client.post(CANCEL_URL, {"orderId": order.id}, format="json")

        assert response.status_code == 200
        assert response.json() == {"message": "Delivery cancelled successfully"}
        order.refresh_from_db()
        assert order.status == "cancelled"
        assert Delivery.objects.get(order=order).status == "failed"

    def test_legacy_delivery_id_key(self, auth_client, make_order):
        order = make_order()

        response = auth_client.post(
            CANCEL_URL, {"deliveryId": str(order.id)}, format="json"
        )

        assert response.status_code == 200
        order.refresh_from_db()
        assert order.status == "cancelled"

    def test_cancel_twice_succeeds(self, auth_client, make_order):
        order = make_order()
        auth_client.post(CANCEL_URL, {"orderId": order.id}, format="json")

        response = auth_client.post(CANCEL_URL, {"orderId": order.id}, format="json")

        assert response.status_code == 200
        history = Delivery.objects.get(order=order).status_history
        assert [entry["status"] for entry in history] == ["pending", "failed"]

    @pytest.mark.parametrize("raw", ["abc", "0", "-1", ""])
    def test_invalid_id(self, auth_client, raw):
        response = auth_client.post(CANCEL_URL, {"orderId": raw}, format="json")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid delivery ID"}

    def test_unknown_order(self, auth_client):
        response = auth_client.post(CANCEL_URL, {"orderId": 999}, format="json")

        assert response.status_code == 404
        assert response.json() == {"error": "Delivery not found"}

    def test_delivered_order_cannot_be_cancelled(self, auth_client, make_order):
        order = make_order()
        _advance(auth_client, order, "assigned", "in_transit", "delivered")

        response = auth_client.post(CANCEL_URL, {"orderId": order.id}, format="json")

        assert response.status_code == 400
        assert response.json() == {"error": "Cannot cancel a delivered order"}


class TestTrackDelivery:
    def test_returns_delivery_view(self, auth_client, make_order):
        order = make_order(object_type="bicycle", source="Bizerte", destination="Tunis")

        response = auth_client.get(f"/api/delivery/{order.id}/")

        assert response.status_code == 200
        body = response.json()
        assert body["orderId"] == order.id
        assert body["objectType"] == "bicycle"
        assert body["source"] == "Bizerte"
        assert body["destination"] == "Tunis"
        assert body["currentStatus"] == "pending"
        assert body["orderStatus"] == "pending"
        assert body["driverId"] is None
        assert body["shippingDate"] == "2024-06-01"

    def test_tracking_is_read_only(self, auth_client, make_order):
        order = make_order()
        _advance(auth_client, order, "assigned")

        first = auth_client.get(f"/api/delivery/{order.id}/").json()
        second = auth_client.get(f"/api/delivery/{order.id}/").json()

        assert first == second
        assert [entry["status"] for entry in first["statusHistory"]] == [
            "pending",
            "assigned",
        ]

    def test_unknown_order(self, auth_client):
        response = auth_client.get("/api/delivery/999/")

        assert response.status_code == 404
        assert response.json() == {"error": "Delivery not found"}


class TestUpdateStatus:
    def test_valid_transition(self, auth_client, make_order):
        order = make_order()

        response = auth_client.post(
            _status_url(order), {"newStatus": "assigned"}, format="json"
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["newStatus"] == "assigned"
        assert body["updatedAt"]

    def test_delivered_cascades_to_order(self, auth_client, make_order):
        order = make_order()

        _advance(auth_client, order, "assigned", "in_transit", "delivered")

        order.refresh_from_db()
        assert order.status == "delivered"
        body = auth_client.get(f"/api/delivery/{order.id}/").json()
        assert body["currentStatus"] == "delivered"
        assert body["orderStatus"] == "delivered"
        timestamps = [entry["timestamp"] for entry in body["statusHistory"]]
        assert timestamps == sorted(timestamps)

    def test_invalid_transition(self, auth_client, make_order):
        order = make_order()

        response = auth_client.post(
            _status_url(order), {"newStatus": "delivered"}, format="json"
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "Cannot transition from pending to delivered"
        }

    def test_unknown_status(self, auth_client, make_order):
        order = make_order()

        response = auth_client.post(
            _status_url(order), {"newStatus": "lost"}, format="json"
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid status: lost"}

    def test_missing_status(self, auth_client, make_order):
        order = make_order()

        response = auth_client.post(_status_url(order), {}, format="json")

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: newStatus"}

    def test_unknown_order(self, auth_client):
        response = auth_client.post(
            "/api/delivery/999/update-status/", {"newStatus": "assigned"}, format="json"
        )

        assert response.status_code == 404


class TestAssignDriver:
    def test_assigns_available_driver(self, auth_client, make_order, make_driver):
        order = make_order()
        driver = make_driver()

        response = auth_client.post(
            f"/api/delivery/{order.id}/assign-driver/",
            {"driverId": driver.id},
            format="json",
        )

        assert response.status_code == 200
        body = response.json()
        assert body["driverId"] == driver.id
        assert body["currentStatus"] == "assigned"
        driver.refresh_from_db()
        assert driver.is_available is False

    def test_busy_driver_is_a_conflict(self, auth_client, make_order, make_driver):
        order = make_order()
        driver = make_driver(is_available=False)

        response = auth_client.post(
            f"/api/delivery/{order.id}/assign-driver/",
            {"driverId": driver.id},
            format="json",
        )

        assert response.status_code == 409
        assert Delivery.objects.get(order=order).driver_id is None

    def test_invalid_driver_id(self, auth_client, make_order):
        order = make_order()

        response = auth_client.post(
            f"/api/delivery/{order.id}/assign-driver/",
            {"driverId": "nobody"},
            format="json",
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid driver ID"}
