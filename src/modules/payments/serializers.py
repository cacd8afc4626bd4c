"""Payment DRF serializers."""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import Order


class InitiatePaymentSerializer(serializers.Serializer):
    orderId = serializers.CharField()


class PaymentStatusSerializer(serializers.ModelSerializer):
    orderId = serializers.IntegerField(source="id", read_only=True)
    paymentId = serializers.CharField(source="payment_id", read_only=True)
    paymentStatus = serializers.CharField(source="payment_status", read_only=True)
    orderStatus = serializers.CharField(source="status", read_only=True)

    class Meta:
        model = Order
        fields = ["orderId", "paymentId", "paymentStatus", "orderStatus", "total"]
        read_only_fields = fields
