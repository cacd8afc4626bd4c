"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
Creation writes the Order and its Product inside ``transaction.atomic()``;
the delivery row is added by the caller in the same transaction.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

import structlog
from django.db import models, transaction
from django.utils import timezone

from modules.core.outbox import record_domain_events
from modules.deliveries.constants import DeliveryStatus
from modules.orders.constants import OrderStatus
from modules.orders.models import Order, Product
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create (aggregate root + product)
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        order = Order(
            customer_id=data["customer_id"],
            status=OrderStatus.PENDING,
            source=data["source"],
            destination=data["destination"],
        )
        order.save()

        product_data = data["product"]
        Product.objects.create(
            order=order,
            object_type=product_data["object_type"],
            description=product_data.get("description"),
            image_path=product_data.get("image_path"),
        )

        logger.info("order.rows_inserted", order_id=order.id)
        return order

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def _with_relations(self) -> "models.QuerySet[Order]":
        return Order.objects.select_related("delivery", "customer").prefetch_related(
            "products"
        )

    def get_by_id(self, id: int) -> Optional[Order]:
        """Retrieve an order with eager-loaded relations (``None`` if absent)."""
        return self._with_relations().filter(id=id).first()

    def get_for_update(self, id: int) -> Optional[Order]:
        return Order.objects.select_for_update().filter(id=id).first()

    def get_by_payment_id(self, payment_id: str) -> Optional[Order]:
        return Order.objects.filter(payment_id=payment_id).first()

    def get_for_update_by_payment_id(self, payment_id: str) -> Optional[Order]:
        return Order.objects.select_for_update().filter(payment_id=payment_id).first()

    def list_for_customer(self, customer_id: int) -> "models.QuerySet[Order]":
        return (
            self._with_relations()
            .filter(customer_id=customer_id)
            .order_by("-created_at", "-id")
        )

    def list_in_transit(self, customer_id: int) -> "models.QuerySet[Order]":
        return self.list_for_customer(customer_id).filter(
            delivery__status=DeliveryStatus.IN_TRANSIT
        )

    def list_pending_jobs(self, source: Optional[str] = None) -> "models.QuerySet[Order]":
        queryset = self._with_relations().filter(
            delivery__status=DeliveryStatus.PENDING
        )
        if source:
            queryset = queryset.filter(source__icontains=source)
        return queryset.order_by("-created_at", "-id")

    def set_product_price(self, order: Order, price: Decimal) -> None:
        Product.objects.filter(order=order).update(price=price, updated_at=timezone.now())

    # ------------------------------------------------------------------
    # Save (IRepository contract)
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: Order) -> Order:
        """Persist an order and write its domain events to the outbox."""
        entity.save()
        event_count = record_domain_events(entity, topic="orders")
        logger.info("order.saved", order_id=entity.id, event_count=event_count)
        return entity
