"""Domain events of the payment collaborator."""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class PaymentConfirmed(DomainEvent):
    """The gateway reported the order's payment as completed."""

    payment_id: str = ""


@dataclass(frozen=True)
class PaymentFailed(DomainEvent):
    """The gateway reported the order's payment as failed or expired."""

    payment_id: str = ""
