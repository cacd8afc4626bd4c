"""Dashboard output serializers."""

from __future__ import annotations

from rest_framework import serializers


class RecentDeliverySerializer(serializers.Serializer):
    orderId = serializers.IntegerField(source="order_id")
    status = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    customerName = serializers.CharField(source="customer_name")


class TopDriverSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    vehicleType = serializers.CharField(source="vehicle_type")
    rating = serializers.DecimalField(max_digits=5, decimal_places=2)
