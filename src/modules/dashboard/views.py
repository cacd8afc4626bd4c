"""Dashboard API view."""

from __future__ import annotations

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.dashboard.repositories import DashboardDjangoRepository
from modules.dashboard.serializers import RecentDeliverySerializer, TopDriverSerializer
from modules.dashboard.services import DashboardService


class DashboardView(APIView):
    """GET /api/dashboard/"""

    def get(self, request: Request) -> Response:
        result = DashboardService(repository=DashboardDjangoRepository()).get_stats()
        return Response(
            {
                "success": True,
                "stats": result.stats,
                "recentDeliveries": RecentDeliverySerializer(
                    result.recent_deliveries, many=True
                ).data,
                "topDrivers": TopDriverSerializer(result.top_drivers, many=True).data,
            }
        )
