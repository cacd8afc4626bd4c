"""Event handlers for Deliveries domain events."""

from __future__ import annotations

import structlog

from modules.deliveries.events import DeliveryStatusChanged, DriverAssigned
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class DeliveryStatusChangedHandler(IEventHandler[DeliveryStatusChanged]):
    def handle(self, event: DeliveryStatusChanged) -> None:
        logger.info(
            "delivery.event.status_changed",
            delivery_id=event.aggregate_id,
            order_id=event.order_id,
            old_status=event.old_status,
            new_status=event.new_status,
        )


class DriverAssignedHandler(IEventHandler[DriverAssigned]):
    def handle(self, event: DriverAssigned) -> None:
        logger.info(
            "delivery.event.driver_assigned",
            delivery_id=event.aggregate_id,
            order_id=event.order_id,
            driver_id=event.driver_id,
        )


delivery_status_changed_handler = DeliveryStatusChangedHandler()
driver_assigned_handler = DriverAssignedHandler()
