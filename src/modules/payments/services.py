"""Payment service layer (Use Cases).

Talks to the gateway outside of any database transaction, then records
the outcome on the order under a row lock.  A gateway failure leaves the
order untouched.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.orders.constants import OrderStatus, PaymentStatus
from modules.orders.exceptions import OrderNotFound
from modules.payments.events import PaymentConfirmed, PaymentFailed
from modules.payments.exceptions import InvalidPaymentAmount, OrderNotPayable
from modules.payments.gateway import FAILED_STATUSES, PAID_STATUSES

if TYPE_CHECKING:
    from modules.deliveries.services import DeliveryService
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.payments.dtos import InitiatePaymentDTO, PaymentWebhookDTO
    from modules.payments.gateway import PaymentGatewayClient, PaymentSession

logger = structlog.get_logger(__name__)


class PaymentService:
    """Application service for payment use-cases."""

    def __init__(
        self,
        order_repository: IOrderRepository,
        delivery_service: DeliveryService,
        gateway: PaymentGatewayClient,
        minor_units: int,
    ) -> None:
        self._order_repo = order_repository
        self._delivery_service = delivery_service
        self._gateway = gateway
        self._minor_units = minor_units

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def initiate_payment(self, dto: InitiatePaymentDTO) -> PaymentSession:
        """Open a gateway session for the order and remember its reference.

        Raises:
            OrderNotFound: unknown order.
            OrderNotPayable: the order is cancelled or already paid.
            InvalidPaymentAmount: the total converts to zero or less.
            PaymentGatewayError: the gateway call failed.
        """
        order = self.get_order(dto.order_id)
        log = logger.bind(order_id=order.id)

        if order.status == OrderStatus.CANCELLED:
            raise OrderNotPayable("Order is cancelled")
        if order.payment_status == PaymentStatus.PAID:
            raise OrderNotPayable("Order is already paid")

        amount = int(
            (Decimal(order.total) * self._minor_units).quantize(
                Decimal("1"), rounding=ROUND_HALF_UP
            )
        )
        if amount <= 0:
            log.warning("payment.invalid_amount", amount=amount)
            raise InvalidPaymentAmount(f"Invalid amount: {amount}")

        customer = order.customer
        session = self._gateway.init_payment(
            order_id=order.id,
            customer_id=customer.id,
            amount=amount,
            customer_email=customer.email,
            customer_name=customer.name,
        )

        with transaction.atomic():
            locked = self._order_repo.get_for_update(order.id)
            locked.payment_id = session.payment_id
            locked.payment_status = PaymentStatus.INITIATED
            self._order_repo.save(locked)

        log.info("payment.initiated", payment_id=session.payment_id, amount=amount)
        return session

    def handle_webhook(self, dto: PaymentWebhookDTO) -> Order:
        """Apply the gateway's verdict on a payment to its order.

        Replays are harmless: a paid order stays paid.

        Raises:
            OrderNotFound: no order carries that payment reference.
            PaymentGatewayError: the status could not be fetched.
        """
        if not self._order_repo.get_by_payment_id(dto.payment_ref):
            raise OrderNotFound(f"No order for payment {dto.payment_ref}")

        gateway_status = self._gateway.get_payment_status(dto.payment_ref)
        log = logger.bind(payment_id=dto.payment_ref, gateway_status=gateway_status)

        with transaction.atomic():
            order = self._order_repo.get_for_update_by_payment_id(dto.payment_ref)
            if order is None:
                raise OrderNotFound(f"No order for payment {dto.payment_ref}")
            log = log.bind(order_id=order.id)

            if order.payment_status == PaymentStatus.PAID:
                log.info("payment.webhook_replayed")
                return order

            if gateway_status in PAID_STATUSES:
                order.payment_status = PaymentStatus.PAID
                order.add_domain_event(
                    PaymentConfirmed(aggregate_id=order.id, payment_id=dto.payment_ref)
                )
                self._order_repo.save(order)
                if order.status == OrderStatus.PENDING:
                    self._delivery_service.advance_after_payment(order.id)
                log.info("payment.confirmed")
            elif gateway_status in FAILED_STATUSES:
                if order.payment_status != PaymentStatus.FAILED:
                    order.payment_status = PaymentStatus.FAILED
                    order.add_domain_event(
                        PaymentFailed(aggregate_id=order.id, payment_id=dto.payment_ref)
                    )
                    self._order_repo.save(order)
                log.warning("payment.failed")
            else:
                log.info("payment.still_pending")

        return order

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: int) -> Order:
        """Raises ``OrderNotFound`` when the order does not exist."""
        order = self._order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFound(f"No order found with ID: {order_id}")
        return order
