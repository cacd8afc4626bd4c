"""Driver matching URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.drivers.views import NearestDriversView, SearchDriversView

urlpatterns = [
    path("nearest-drivers/", NearestDriversView.as_view(), name="drivers-nearest"),
    path("drivers/search/", SearchDriversView.as_view(), name="drivers-search"),
]
