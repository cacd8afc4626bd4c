"""Delivery-agent URL configuration (mounted under ``api/delivery-agent/``)."""

from __future__ import annotations

from django.urls import path

from modules.orders.views import PendingJobsView

urlpatterns = [
    path("orders/", PendingJobsView.as_view(), name="agent-pending-orders"),
]
