"""Django ORM implementation of the Delivery repository.

Writes go through ``save``, which also records the aggregate's pending
domain events in the outbox inside the caller's transaction.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import structlog
from django.db import transaction

from modules.core.outbox import record_domain_events
from modules.deliveries.constants import DeliveryStatus
from modules.deliveries.models import Delivery
from modules.deliveries.repositories.interfaces import IDeliveryRepository
from modules.orders.models import Order

logger = structlog.get_logger(__name__)


class DeliveryDjangoRepository(IDeliveryRepository):
    """Concrete Delivery repository backed by Django ORM."""

    @transaction.atomic
    def create_for_order(self, order: Order, shipping_date: date) -> Delivery:
        delivery = Delivery(
            order=order,
            status=DeliveryStatus.PENDING,
            shipping_date=shipping_date,
        )
        delivery.save()
        logger.info("delivery.created", delivery_id=delivery.id, order_id=order.id)
        return delivery

    def get_by_id(self, id: int) -> Optional[Delivery]:
        return (
            Delivery.objects.select_related("order", "driver")
            .prefetch_related("order__products")
            .filter(id=id)
            .first()
        )

    def get_by_order_id(self, order_id: int) -> Optional[Delivery]:
        return (
            Delivery.objects.select_related("order", "driver")
            .prefetch_related("order__products")
            .filter(order_id=order_id)
            .first()
        )

    def get_for_update_by_order_id(self, order_id: int) -> Optional[Delivery]:
        """Lock order first, then delivery, so every writer takes locks in the same order."""
        order = Order.objects.select_for_update().filter(id=order_id).first()
        if order is None:
            return None
        delivery = Delivery.objects.select_for_update().filter(order=order).first()
        if delivery is not None:
            delivery.order = order
        return delivery

    @transaction.atomic
    def save(self, entity: Delivery) -> Delivery:
        """Persist a delivery and write its domain events to the outbox."""
        entity.save()
        event_count = record_domain_events(entity, topic="deliveries")
        logger.info(
            "delivery.saved",
            delivery_id=entity.id,
            status=entity.status,
            event_count=event_count,
        )
        return entity
