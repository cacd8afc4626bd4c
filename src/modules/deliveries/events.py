"""Domain events for the Deliveries bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class DeliveryStatusChanged(DomainEvent):
    """Raised on every delivery status transition."""

    order_id: int = 0
    old_status: str = ""
    new_status: str = ""


@dataclass(frozen=True)
class DriverAssigned(DomainEvent):
    """Raised when a driver is attached to a delivery."""

    order_id: int = 0
    driver_id: Optional[int] = None
