"""Integration tests for POST /api/delivery/order/.

Covers:
- JSON and multipart creation (201, ids, stored image)
- The created delivery tracks as pending at the shipping date
- Missing fields, bad date, unknown customer
- Authentication required
"""

import pytest
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile

from modules.core.models import OutboxEvent
from modules.deliveries.models import Delivery
from modules.orders.models import Order, Product

pytestmark = pytest.mark.integration

URL = "/api/delivery/order/"


@pytest.fixture()
def payload(customer):
    return {
        "customerId": customer.id,
        "objectType": "sofa",
        "source": "Tunis",
        "destination": "Sfax",
        "shippingDate": "2024-06-01",
    }


class TestCreateOrder:
    def test_creates_order_product_and_delivery(self, auth_client, payload, customer):
        response = auth_client.post(URL, payload, format="json")

        assert response.status_code == 201
        body = response.json()
        order = Order.objects.get(id=body["orderId"])
        delivery = Delivery.objects.get(id=body["deliveryId"])
        assert body["imagePath"] is None
        assert order.customer_id == customer.id
        assert order.status == "pending"
        assert order.payment_id is None
        assert str(order.total) == "0.00"
        assert delivery.order_id == order.id
        assert delivery.status == "pending"
        assert delivery.driver_id is None
        assert delivery.status_history == []
        assert Product.objects.get(order=order).object_type == "sofa"

    def test_new_order_tracks_as_pending(self, auth_client, payload):
        order_id = auth_client.post(URL, payload, format="json").json()["orderId"]

        response = auth_client.get(f"/api/delivery/{order_id}/")

        assert response.status_code == 200
        body = response.json()
        assert body["currentStatus"] == "pending"
        assert body["objectType"] == "sofa"
        assert body["statusHistory"] == [
            {"status": "pending", "timestamp": "2024-06-01T00:00:00Z"}
        ]

    def test_records_order_created_event(self, auth_client, payload):
        order_id = auth_client.post(URL, payload, format="json").json()["orderId"]

        event = OutboxEvent.objects.get(event_type="OrderCreated")
        assert event.aggregate_id == str(order_id)
        assert event.topic == "orders"

    def test_multipart_with_image(self, auth_client, payload):
        image = SimpleUploadedFile("Box.PNG", b"fake-image-bytes", content_type="image/png")

        response = auth_client.post(URL, {**payload, "image": image}, format="multipart")

        assert response.status_code == 201
        path = response.json()["imagePath"]
        assert path.startswith("uploads/")
        assert path.endswith(".png")
        assert default_storage.exists(path)
        product = Product.objects.get(order_id=response.json()["orderId"])
        assert product.image_path == path

    def test_description_is_stored(self, auth_client, payload):
        response = auth_client.post(
            URL, {**payload, "description": "Three-seater"}, format="json"
        )

        product = Product.objects.get(order_id=response.json()["orderId"])
        assert product.description == "Three-seater"

    def test_missing_fields(self, auth_client):
        response = auth_client.post(URL, {"source": "Tunis"}, format="json")

        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required fields: customerId, objectType, destination, shippingDate"
        }
        assert Order.objects.count() == 0

    def test_invalid_shipping_date(self, auth_client, payload):
        response = auth_client.post(
            URL, {**payload, "shippingDate": "not-a-date"}, format="json"
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid shipping date."}

    def test_unknown_customer(self, auth_client, payload):
        response = auth_client.post(URL, {**payload, "customerId": 999}, format="json")

        assert response.status_code == 404
        assert response.json() == {"error": "Customer 999 not found"}
        assert Order.objects.count() == 0

    def test_requires_authentication(self, api_client, payload):
        response = api_client.post(URL, payload, format="json")

        assert response.status_code == 401
        assert "error" in response.json()
