"""Payment URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.payments.views import InitiatePaymentView, PaymentStatusView, PaymentWebhookView

urlpatterns = [
    path("initiate/", InitiatePaymentView.as_view(), name="payment-initiate"),
    path("webhook/", PaymentWebhookView.as_view(), name="payment-webhook"),
    path("status/<int:order_id>/", PaymentStatusView.as_view(), name="payment-status"),
]
