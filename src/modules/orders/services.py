"""Order service layer (Use Cases).

Creates the order, product and delivery rows as one unit of work and
serves the read models of the reporting facade (customer history,
in-transit orders, the delivery-agent job board).

Business rules enforced:
- The customer must be a live account.
- Order, product and delivery are written in a single transaction; any
  failure leaves none of them behind (a stored image is removed too).
- A new order is ``pending`` with a zero total and no payment reference;
  its delivery is ``pending`` with no driver and an empty history.
- Pricing sets the product price and the order total together, and only
  while the order is not cancelled and no payment has started.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Optional

import structlog
from django.db import DatabaseError, transaction

from modules.orders.constants import OrderStatus, PaymentStatus
from modules.orders.events import OrderCreated, OrderPriced
from modules.orders.exceptions import (
    CustomerNotFound,
    OrderCreationFailed,
    OrderNotFound,
    OrderNotPriceable,
)
from modules.orders.storage import discard_order_image, store_order_image

if TYPE_CHECKING:
    from django.core.files.uploadedfile import UploadedFile
    from django.db import models

    from modules.accounts.repositories.interfaces import IAccountRepository
    from modules.deliveries.models import Delivery
    from modules.deliveries.repositories.interfaces import IDeliveryRepository
    from modules.orders.dtos import CreateOrderDTO, PendingJobsQuery, PriceOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        delivery_repository: IDeliveryRepository,
        account_repository: IAccountRepository,
    ) -> None:
        self._order_repo = order_repository
        self._delivery_repo = delivery_repository
        self._account_repo = account_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(
        self, dto: CreateOrderDTO, image: Optional[UploadedFile] = None
    ) -> tuple[Order, Delivery]:
        """Create an order with its product and its pending delivery.

        Steps:
        1. Validate the customer exists.
        2. Store the uploaded image, if any.
        3. Insert Order, Product and Delivery atomically and record
           ``OrderCreated`` in the outbox.

        Raises:
            CustomerNotFound: no live account with ``customer_id``.
            OrderCreationFailed: a write failed; nothing was persisted.
        """
        log = logger.bind(customer_id=dto.customer_id)
        log.info("order.creation_started")

        if not self._account_repo.get_by_id(dto.customer_id):
            raise CustomerNotFound(f"Customer {dto.customer_id} not found")

        image_path: Optional[str] = None
        try:
            if image is not None:
                image_path = store_order_image(image)

            with transaction.atomic():
                order = self._order_repo.create(
                    {
                        "customer_id": dto.customer_id,
                        "source": dto.source,
                        "destination": dto.destination,
                        "product": {
                            "object_type": dto.object_type,
                            "description": dto.description,
                            "image_path": image_path,
                        },
                    }
                )
                delivery = self._delivery_repo.create_for_order(
                    order, dto.shipping_date
                )
                order.add_domain_event(
                    OrderCreated(
                        aggregate_id=order.id,
                        customer_id=dto.customer_id,
                        delivery_id=delivery.id,
                    )
                )
                self._order_repo.save(order)
        except (DatabaseError, OSError) as exc:
            discard_order_image(image_path)
            log.error("order.creation_failed", error=str(exc))
            raise OrderCreationFailed("Failed to create delivery") from exc

        log.info(
            "order.created",
            order_id=order.id,
            delivery_id=delivery.id,
            has_image=image_path is not None,
        )
        return order, delivery

    @transaction.atomic
    def price_order(self, dto: PriceOrderDTO) -> Order:
        """Set the product price and the order total in one write.

        Raises:
            OrderNotFound: unknown order.
            OrderNotPriceable: the order is cancelled, or a payment was
                already initiated or completed.
        """
        order = self._order_repo.get_for_update(dto.order_id)
        if order is None:
            raise OrderNotFound()
        log = logger.bind(order_id=order.id)

        if order.status == OrderStatus.CANCELLED:
            log.warning("order.price_refused", reason="cancelled")
            raise OrderNotPriceable("Order is cancelled")
        if order.payment_status != PaymentStatus.UNPAID:
            log.warning("order.price_refused", reason=order.payment_status)
            raise OrderNotPriceable("Order payment already started")

        price = dto.price.quantize(Decimal("0.01"))
        self._order_repo.set_product_price(order, price)
        order.total = price
        order.add_domain_event(OrderPriced(aggregate_id=order.id, total=str(price)))
        self._order_repo.save(order)

        log.info("order.priced", total=str(price))
        return order

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customer_orders(self, customer_id: int) -> "models.QuerySet[Order]":
        """All orders of a customer, newest first."""
        return self._order_repo.list_for_customer(customer_id)

    def list_in_transit_orders(self, customer_id: int) -> "models.QuerySet[Order]":
        """Orders of a customer whose delivery is on its way."""
        return self._order_repo.list_in_transit(customer_id)

    def list_pending_jobs(self, query: PendingJobsQuery) -> "models.QuerySet[Order]":
        """Orders still waiting for a driver, for the delivery-agent board."""
        return self._order_repo.list_pending_jobs(query.source)
