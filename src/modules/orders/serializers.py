"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.  Field names follow the camelCase
contract of the existing clients.
"""

from __future__ import annotations

from typing import Optional

from django.core.files.storage import default_storage
from rest_framework import serializers

from modules.orders.models import Order

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class CreateOrderSerializer(serializers.Serializer):
    """Validates presence of the order creation fields.

    ``shippingDate`` is parsed by ``CreateOrderDTO`` so that date errors
    carry their own message.
    """

    customerId = serializers.IntegerField()
    objectType = serializers.CharField()
    source = serializers.CharField()
    destination = serializers.CharField()
    shippingDate = serializers.CharField()
    description = serializers.CharField(required=False, allow_blank=True)
    image = serializers.FileField(required=False, allow_empty_file=False)


class PriceOrderSerializer(serializers.Serializer):
    price = serializers.DecimalField(max_digits=10, decimal_places=2)


class PendingJobsParamsSerializer(serializers.Serializer):
    source = serializers.CharField(required=False, allow_blank=True)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


def _image_url(path: Optional[str]) -> Optional[str]:
    return default_storage.url(path) if path else None


class CustomerOrderSerializer(serializers.ModelSerializer):
    """Order with its product and delivery status, for order history."""

    date = serializers.DateTimeField(source="created_at", read_only=True)
    paymentId = serializers.CharField(source="payment_id", read_only=True)
    paymentStatus = serializers.CharField(source="payment_status", read_only=True)
    objectType = serializers.SerializerMethodField()
    description = serializers.SerializerMethodField()
    imageUrl = serializers.SerializerMethodField()
    deliveryId = serializers.SerializerMethodField()
    deliveryStatus = serializers.SerializerMethodField()
    shippingDate = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            "id",
            "date",
            "status",
            "total",
            "source",
            "destination",
            "paymentId",
            "paymentStatus",
            "objectType",
            "description",
            "imageUrl",
            "deliveryId",
            "deliveryStatus",
            "shippingDate",
        ]
        read_only_fields = fields

    def get_objectType(self, obj: Order) -> Optional[str]:
        product = obj.product
        return product.object_type if product else None

    def get_description(self, obj: Order) -> Optional[str]:
        product = obj.product
        return product.description if product else None

    def get_imageUrl(self, obj: Order) -> Optional[str]:
        product = obj.product
        return _image_url(product.image_path) if product else None

    def get_deliveryId(self, obj: Order) -> Optional[int]:
        delivery = getattr(obj, "delivery", None)
        return delivery.id if delivery else None

    def get_deliveryStatus(self, obj: Order) -> Optional[str]:
        delivery = getattr(obj, "delivery", None)
        return delivery.status if delivery else None

    def get_shippingDate(self, obj: Order) -> Optional[str]:
        delivery = getattr(obj, "delivery", None)
        return delivery.shipping_date.isoformat() if delivery else None


class PendingJobSerializer(serializers.ModelSerializer):
    """Job board entry shown to delivery agents."""

    date = serializers.DateTimeField(source="created_at", read_only=True)
    objectType = serializers.SerializerMethodField()
    imageUrl = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = ["id", "objectType", "imageUrl", "source", "destination", "date"]
        read_only_fields = fields

    def get_objectType(self, obj: Order) -> Optional[str]:
        product = obj.product
        return product.object_type if product else None

    def get_imageUrl(self, obj: Order) -> Optional[str]:
        product = obj.product
        return _image_url(product.image_path) if product else None
