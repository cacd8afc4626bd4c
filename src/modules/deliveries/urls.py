"""Delivery URL configuration (mounted under ``api/delivery/``)."""

from __future__ import annotations

from django.urls import path

from modules.deliveries.views import (
    AssignDriverView,
    CancelDeliveryView,
    TrackDeliveryView,
    UpdateDeliveryStatusView,
)

urlpatterns = [
    path("cancel-delivery/", CancelDeliveryView.as_view(), name="delivery-cancel"),
    path("<int:order_id>/", TrackDeliveryView.as_view(), name="delivery-track"),
    path(
        "<int:order_id>/update-status/",
        UpdateDeliveryStatusView.as_view(),
        name="delivery-update-status",
    ),
    path(
        "<int:order_id>/assign-driver/",
        AssignDriverView.as_view(),
        name="delivery-assign-driver",
    ),
]
