"""Delivery domain constants.

Defines status choices and valid status transitions for the delivery
state machine.
"""

from django.db import models


class DeliveryStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    ASSIGNED = "assigned", "Assigned"
    IN_TRANSIT = "in_transit", "In transit"
    DELIVERED = "delivered", "Delivered"
    FAILED = "failed", "Failed"


VALID_TRANSITIONS: dict[str, frozenset[str]] = {
    DeliveryStatus.PENDING.value: frozenset(
        {DeliveryStatus.ASSIGNED.value, DeliveryStatus.FAILED.value}
    ),
    DeliveryStatus.ASSIGNED.value: frozenset(
        {DeliveryStatus.IN_TRANSIT.value, DeliveryStatus.FAILED.value}
    ),
    DeliveryStatus.IN_TRANSIT.value: frozenset(
        {DeliveryStatus.DELIVERED.value, DeliveryStatus.FAILED.value}
    ),
    DeliveryStatus.DELIVERED.value: frozenset(),
    DeliveryStatus.FAILED.value: frozenset(),
}

TERMINAL_STATES: frozenset[str] = frozenset(
    {DeliveryStatus.DELIVERED.value, DeliveryStatus.FAILED.value}
)

# Statuses in which the driver is held by the delivery.
DRIVER_HOLDING_STATES: frozenset[str] = frozenset(
    {DeliveryStatus.ASSIGNED.value, DeliveryStatus.IN_TRANSIT.value}
)

# Statuses that still accept a driver.
ASSIGNABLE_STATES: frozenset[str] = frozenset(
    {DeliveryStatus.PENDING.value, DeliveryStatus.ASSIGNED.value}
)

HISTORY_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
