"""Domain events for the Orders bounded context."""

from __future__ import annotations

from dataclasses import dataclass

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    """Raised when an order is created with its product and delivery."""

    customer_id: int = 0
    delivery_id: int = 0


@dataclass(frozen=True)
class OrderCancelled(DomainEvent):
    """Raised when an order is cancelled (its delivery fails with it)."""


@dataclass(frozen=True)
class OrderDelivered(DomainEvent):
    """Raised when the order's delivery reaches ``delivered``."""


@dataclass(frozen=True)
class OrderPriced(DomainEvent):
    """Raised when the order receives its price (product price and total)."""

    total: str = "0.00"
