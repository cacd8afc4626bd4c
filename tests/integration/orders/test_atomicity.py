"""Atomicity tests for order creation.

A failure while writing any of the three rows must leave no order,
product, delivery, outbox row or stored image behind.
"""

from unittest.mock import patch

import pytest
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import DatabaseError

from modules.core.models import OutboxEvent
from modules.deliveries.models import Delivery
from modules.orders.models import Order, Product

pytestmark = pytest.mark.integration

URL = "/api/delivery/order/"


@pytest.fixture()
def payload(customer):
    return {
        "customerId": customer.id,
        "objectType": "fridge",
        "source": "Sousse",
        "destination": "Tunis",
        "shippingDate": "2024-07-15",
    }


def _assert_nothing_persisted():
    assert Order.objects.count() == 0
    assert Product.objects.count() == 0
    assert Delivery.objects.count() == 0
    assert OutboxEvent.objects.count() == 0


class TestOrderCreationAtomicity:
    def test_delivery_insert_failure_rolls_back(self, auth_client, payload):
        with patch(
            "modules.deliveries.repositories.django_repository."
            "DeliveryDjangoRepository.create_for_order",
            side_effect=DatabaseError("disk full"),
        ):
            response = auth_client.post(URL, payload, format="json")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create delivery"}
        _assert_nothing_persisted()

    def test_product_insert_failure_rolls_back(self, auth_client, payload):
        with patch(
            "modules.orders.repositories.django_repository.Product.objects.create",
            side_effect=DatabaseError("constraint"),
        ):
            response = auth_client.post(URL, payload, format="json")

        assert response.status_code == 500
        _assert_nothing_persisted()

    def test_stored_image_removed_on_failure(self, auth_client, payload):
        image = SimpleUploadedFile("crate.jpg", b"jpeg-bytes", content_type="image/jpeg")
        with patch(
            "modules.deliveries.repositories.django_repository."
            "DeliveryDjangoRepository.create_for_order",
            side_effect=DatabaseError("disk full"),
        ):
            response = auth_client.post(
                URL, {**payload, "image": image}, format="multipart"
            )

        assert response.status_code == 500
        _assert_nothing_persisted()
        _, files = default_storage.listdir("uploads")
        assert files == []
