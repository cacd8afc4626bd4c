"""Order URL configuration (mounted under ``api/delivery/``)."""

from __future__ import annotations

from django.urls import path

from modules.orders.views import (
    CreateOrderView,
    CustomerOrdersView,
    InTransitOrdersView,
    PriceOrderView,
)

urlpatterns = [
    path("order/", CreateOrderView.as_view(), name="order-create"),
    path("<int:order_id>/price/", PriceOrderView.as_view(), name="order-price"),
    path(
        "user-orders/<int:customer_id>/",
        CustomerOrdersView.as_view(),
        name="order-customer-list",
    ),
    path(
        "<int:customer_id>/in-transit/",
        InTransitOrdersView.as_view(),
        name="order-in-transit",
    ),
]
