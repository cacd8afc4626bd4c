"""Delivery lifecycle service (Use Cases).

Owns every write after creation: cancellation, status transitions and
driver assignment.  Each command locks the order and delivery rows
(``SELECT FOR UPDATE``) and runs in one transaction, so an order and its
delivery never disagree.

Business rules enforced:
- Transitions follow ``VALID_TRANSITIONS``; ``delivered`` and ``failed``
  are terminal.
- Cancelling sets the order ``cancelled`` and the delivery ``failed``
  together; cancelling twice is a no-op; a delivered order cannot be
  cancelled.
- ``delivered`` on the delivery is the only way an order becomes
  ``delivered``.
- A driver is unavailable while holding a delivery and becomes available
  again when that delivery ends.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.deliveries.constants import (
    ASSIGNABLE_STATES,
    DRIVER_HOLDING_STATES,
    TERMINAL_STATES,
    DeliveryStatus,
)
from modules.deliveries.events import DeliveryStatusChanged, DriverAssigned
from modules.deliveries.exceptions import (
    DeliveryNotFound,
    DriverAlreadyAssigned,
    InvalidStatusTransition,
)
from modules.drivers.exceptions import DriverNotFound, DriverUnavailable
from modules.orders.constants import OrderStatus
from modules.orders.events import OrderCancelled, OrderDelivered

if TYPE_CHECKING:
    from modules.deliveries.dtos import AssignDriverDTO, CancelOrderDTO, UpdateStatusDTO
    from modules.deliveries.models import Delivery
    from modules.deliveries.repositories.interfaces import IDeliveryRepository
    from modules.drivers.repositories.interfaces import IDriverRepository
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class DeliveryService:
    """Application service for Delivery use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        delivery_repository: IDeliveryRepository,
        order_repository: IOrderRepository,
        driver_repository: IDriverRepository,
    ) -> None:
        self._delivery_repo = delivery_repository
        self._order_repo = order_repository
        self._driver_repo = driver_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def cancel_order(self, dto: CancelOrderDTO) -> Delivery:
        """Cancel an order and fail its delivery in one transaction.

        Raises:
            DeliveryNotFound: no order/delivery with that id.
            InvalidStatusTransition: the order was already delivered.
        """
        delivery = self._lock(dto.order_id)
        order = delivery.order
        log = logger.bind(
            order_id=order.id,
            order_status=order.status,
            delivery_status=delivery.status,
        )

        if order.status == OrderStatus.CANCELLED:
            log.info("order.cancel_noop")
            return delivery

        if (
            order.status == OrderStatus.DELIVERED
            or delivery.status == DeliveryStatus.DELIVERED
        ):
            log.warning("order.cancel_not_allowed")
            raise InvalidStatusTransition("Cannot cancel a delivered order")

        if delivery.status != DeliveryStatus.FAILED:
            self._transition(delivery, DeliveryStatus.FAILED)

        order.status = OrderStatus.CANCELLED
        order.add_domain_event(OrderCancelled(aggregate_id=order.id))
        self._order_repo.save(order)
        self._delivery_repo.save(delivery)

        log.info("order.cancelled")
        return delivery

    @transaction.atomic
    def update_status(self, dto: UpdateStatusDTO) -> Delivery:
        """Move a delivery to ``dto.new_status``.

        ``delivered`` cascades onto the order in the same transaction.

        Raises:
            DeliveryNotFound: no order/delivery with that id.
            InvalidStatusTransition: the state machine forbids the move.
        """
        delivery = self._lock(dto.order_id)
        log = logger.bind(
            order_id=dto.order_id,
            current_status=delivery.status,
            new_status=dto.new_status,
        )

        if not delivery.can_transition_to(dto.new_status):
            log.warning("delivery.invalid_transition")
            raise InvalidStatusTransition(
                f"Cannot transition from {delivery.status} to {dto.new_status}"
            )

        self._transition(delivery, dto.new_status)

        if dto.new_status == DeliveryStatus.DELIVERED:
            order = delivery.order
            order.status = OrderStatus.DELIVERED
            order.add_domain_event(OrderDelivered(aggregate_id=order.id))
            self._order_repo.save(order)

        self._delivery_repo.save(delivery)
        log.info("delivery.status_updated")
        return delivery

    @transaction.atomic
    def assign_driver(self, dto: AssignDriverDTO) -> Delivery:
        """Attach an available driver to a delivery awaiting one.

        Raises:
            DeliveryNotFound: no order/delivery with that id.
            InvalidStatusTransition: the delivery is past assignment.
            DriverAlreadyAssigned: the delivery already has a driver.
            DriverNotFound: unknown driver.
            DriverUnavailable: the driver is busy or off duty.
        """
        delivery = self._lock(dto.order_id)
        log = logger.bind(order_id=dto.order_id, driver_id=dto.driver_id)

        if str(delivery.status) not in ASSIGNABLE_STATES:
            log.warning("delivery.assign_not_allowed", status=delivery.status)
            raise InvalidStatusTransition(
                f"Cannot assign a driver to a delivery in status {delivery.status}"
            )
        if delivery.driver_id is not None:
            raise DriverAlreadyAssigned("Delivery already has a driver")

        driver = self._driver_repo.get_for_update(dto.driver_id)
        if not driver:
            raise DriverNotFound(f"Driver {dto.driver_id} not found")
        if not driver.is_available:
            raise DriverUnavailable(f"Driver {dto.driver_id} is not available")

        delivery.driver = driver
        if delivery.status == DeliveryStatus.PENDING:
            self._transition(delivery, DeliveryStatus.ASSIGNED)
        delivery.add_domain_event(
            DriverAssigned(
                aggregate_id=delivery.id,
                order_id=dto.order_id,
                driver_id=driver.id,
            )
        )
        self._driver_repo.set_availability(driver, False)
        self._delivery_repo.save(delivery)

        log.info("delivery.driver_assigned")
        return delivery

    def advance_after_payment(self, order_id: int) -> None:
        """Move a ``pending`` delivery to ``assigned`` once its order is paid.

        Must run inside the caller's transaction; other statuses are left
        untouched.
        """
        delivery = self._delivery_repo.get_for_update_by_order_id(order_id)
        if delivery is None or delivery.status != DeliveryStatus.PENDING:
            return
        self._transition(delivery, DeliveryStatus.ASSIGNED)
        self._delivery_repo.save(delivery)
        logger.info("delivery.advanced_after_payment", order_id=order_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def track_delivery(self, order_id: int) -> Delivery:
        """Read-only view of an order's delivery.

        Raises:
            DeliveryNotFound: no delivery for that order.
        """
        delivery = self._delivery_repo.get_by_order_id(order_id)
        if not delivery:
            raise DeliveryNotFound("Delivery not found")
        return delivery

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _lock(self, order_id: int) -> Delivery:
        delivery = self._delivery_repo.get_for_update_by_order_id(order_id)
        if not delivery:
            raise DeliveryNotFound("Delivery not found")
        return delivery

    def _transition(self, delivery: Delivery, new_status: str) -> None:
        """Record the new status and release the driver when the delivery ends."""
        old_status = delivery.status
        delivery.record_status(new_status)
        delivery.add_domain_event(
            DeliveryStatusChanged(
                aggregate_id=delivery.id,
                order_id=delivery.order_id,
                old_status=str(old_status),
                new_status=str(new_status),
            )
        )
        if (
            str(new_status) in TERMINAL_STATES
            and str(old_status) in DRIVER_HOLDING_STATES
            and delivery.driver_id is not None
        ):
            driver = self._driver_repo.get_for_update(delivery.driver_id)
            if driver:
                self._driver_repo.set_availability(driver, True)
