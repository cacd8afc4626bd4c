"""Driver Matching Engine.

Ranks candidate drivers for a delivery, either by great-circle distance
from a point or by service-area fit.  Both searches are plain reads: no
locks, no caching of availability.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List

import structlog
from django.conf import settings

from modules.drivers.geo import haversine_km

if TYPE_CHECKING:
    from modules.drivers.dtos import NearestDriversQuery, SearchDriversQuery
    from modules.drivers.models import Driver
    from modules.drivers.repositories.interfaces import IDriverRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class NearbyDriver:
    driver: Driver
    distance_km: float


@dataclass(frozen=True)
class AreaDriver:
    driver: Driver
    can_deliver_to_destination: bool


class DriverMatchingService:
    """Application service for driver matching."""

    def __init__(self, repository: IDriverRepository) -> None:
        self._repo = repository

    def find_nearest(self, query: NearestDriversQuery) -> List[NearbyDriver]:
        """Available drivers strictly within ``radius_km`` of the point.

        Sorted by distance, ties by driver id, truncated to ``limit``.
        """
        matches = []
        for driver in self._repo.list_available_with_position():
            distance = haversine_km(
                query.latitude, query.longitude, driver.latitude, driver.longitude
            )
            if distance < query.radius_km:
                matches.append(NearbyDriver(driver=driver, distance_km=distance))

        matches.sort(key=lambda match: (match.distance_km, match.driver.id))
        result = matches[: query.limit]
        logger.info(
            "matching.nearest_searched",
            radius_km=query.radius_km,
            candidates=len(matches),
            returned=len(result),
        )
        return result

    def search_by_area(self, query: SearchDriversQuery) -> List[AreaDriver]:
        """Available drivers serving ``source``, best rated first."""
        drivers = self._repo.search_by_area(
            query.source, query.vehicle_type, settings.MATCHING_RESULT_LIMIT
        )
        destination = query.destination.lower() if query.destination else None

        result = [
            AreaDriver(
                driver=driver,
                can_deliver_to_destination=(
                    destination is None
                    or destination in driver.service_area.lower()
                ),
            )
            for driver in drivers
        ]
        logger.info(
            "matching.area_searched",
            vehicle_type=query.vehicle_type,
            returned=len(result),
        )
        return result
