"""Event handlers for payment events."""

from __future__ import annotations

import structlog

from modules.payments.events import PaymentConfirmed, PaymentFailed
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class PaymentConfirmedHandler(IEventHandler[PaymentConfirmed]):
    def handle(self, event: PaymentConfirmed) -> None:
        logger.info(
            "payment.event.confirmed",
            order_id=event.aggregate_id,
            payment_id=event.payment_id,
        )


class PaymentFailedHandler(IEventHandler[PaymentFailed]):
    def handle(self, event: PaymentFailed) -> None:
        logger.warning(
            "payment.event.failed",
            order_id=event.aggregate_id,
            payment_id=event.payment_id,
        )


payment_confirmed_handler = PaymentConfirmedHandler()
payment_failed_handler = PaymentFailedHandler()
