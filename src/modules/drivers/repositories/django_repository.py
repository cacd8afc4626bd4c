"""Django ORM implementation of the Driver repository."""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.drivers.models import Driver
from modules.drivers.repositories.interfaces import IDriverRepository

logger = structlog.get_logger(__name__)


class DriverDjangoRepository(IDriverRepository):
    """Concrete Driver repository backed by Django ORM."""

    def _alive(self):
        return Driver.objects.select_related("user").filter(
            user__deleted_at__isnull=True
        )

    def get_by_id(self, id: int) -> Optional[Driver]:
        return self._alive().filter(id=id).first()

    def get_for_update(self, id: int) -> Optional[Driver]:
        return (
            Driver.objects.select_for_update()
            .filter(id=id, user__deleted_at__isnull=True)
            .first()
        )

    def list_available_with_position(self) -> List[Driver]:
        return list(
            self._alive()
            .filter(
                is_available=True,
                latitude__isnull=False,
                longitude__isnull=False,
            )
            .order_by("id")
        )

    def search_by_area(
        self, source: str, vehicle_type: Optional[str], limit: int
    ) -> List[Driver]:
        queryset = self._alive().filter(
            is_available=True,
            service_area__icontains=source,
        )
        if vehicle_type is not None:
            queryset = queryset.filter(vehicle_type=vehicle_type)
        return list(queryset.order_by("-rating", "id")[:limit])

    @transaction.atomic
    def save(self, entity: Driver) -> Driver:
        entity.save()
        return entity

    def set_availability(self, driver: Driver, is_available: bool) -> None:
        driver.is_available = is_available
        driver.save(update_fields=["is_available"])
        logger.info(
            "driver.availability_changed",
            driver_id=driver.id,
            is_available=is_available,
        )
