"""Driver matching API views."""

from __future__ import annotations

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.validation import build_dto, require_valid
from modules.drivers.dtos import NearestDriversQuery, SearchDriversQuery
from modules.drivers.repositories.django_repository import DriverDjangoRepository
from modules.drivers.serializers import (
    AreaDriverSerializer,
    NearbyDriverSerializer,
    NearestDriversParamsSerializer,
    SearchDriversParamsSerializer,
)
from modules.drivers.services import DriverMatchingService


def _matching_service() -> DriverMatchingService:
    return DriverMatchingService(repository=DriverDjangoRepository())


class NearestDriversView(APIView):
    """GET /api/delivery/nearest-drivers/?latitude=&longitude=[&radius=&limit=]"""

    def get(self, request: Request) -> Response:
        params = require_valid(NearestDriversParamsSerializer(data=request.query_params))
        fields = {"latitude": params["latitude"], "longitude": params["longitude"]}
        if "radius" in params:
            fields["radius_km"] = params["radius"]
        if "limit" in params:
            fields["limit"] = params["limit"]

        query = build_dto(NearestDriversQuery, **fields)
        matches = _matching_service().find_nearest(query)
        return Response(NearbyDriverSerializer(matches, many=True).data)


class SearchDriversView(APIView):
    """GET /api/delivery/drivers/search/?source=&destination=&vehicleType="""

    def get(self, request: Request) -> Response:
        params = require_valid(SearchDriversParamsSerializer(data=request.query_params))
        query = build_dto(
            SearchDriversQuery,
            source=params["source"],
            destination=params.get("destination"),
            vehicle_type=params.get("vehicleType"),
        )
        matches = _matching_service().search_by_area(query)
        return Response(AreaDriverSerializer(matches, many=True).data)
