"""Delivery DRF serializers (camelCase contract of the tracking clients)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from rest_framework import serializers

from modules.deliveries.models import Delivery


class CancelOrderSerializer(serializers.Serializer):
    """``orderId`` identifies the order; ``deliveryId`` is the legacy key."""

    orderId = serializers.CharField(required=False, allow_blank=True)
    deliveryId = serializers.CharField(required=False, allow_blank=True)


class UpdateStatusSerializer(serializers.Serializer):
    newStatus = serializers.CharField()


class AssignDriverSerializer(serializers.Serializer):
    driverId = serializers.CharField()


class DeliveryViewSerializer(serializers.ModelSerializer):
    """Read-only projection of a delivery with its order and product."""

    deliveryId = serializers.IntegerField(source="id", read_only=True)
    orderId = serializers.IntegerField(source="order_id", read_only=True)
    objectType = serializers.SerializerMethodField()
    source = serializers.CharField(source="order.source", read_only=True)
    destination = serializers.CharField(source="order.destination", read_only=True)
    currentStatus = serializers.CharField(source="status", read_only=True)
    orderStatus = serializers.CharField(source="order.status", read_only=True)
    driverId = serializers.IntegerField(source="driver_id", read_only=True)
    statusHistory = serializers.SerializerMethodField()
    shippingDate = serializers.DateField(source="shipping_date", read_only=True)
    lastUpdated = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Delivery
        fields = [
            "deliveryId",
            "orderId",
            "objectType",
            "source",
            "destination",
            "currentStatus",
            "orderStatus",
            "driverId",
            "statusHistory",
            "shippingDate",
            "lastUpdated",
        ]
        read_only_fields = fields

    def get_objectType(self, obj: Delivery) -> Optional[str]:
        product = obj.order.product
        return product.object_type if product else None

    def get_statusHistory(self, obj: Delivery) -> List[Dict[str, Any]]:
        return obj.history_entries()
