"""Delivery model.

Business rules implemented:
- One delivery per order (OneToOne, PROTECT so an order with a delivery is
  never physically deleted).
- ``status_history`` is an append-only list of ``{status, timestamp}``
  whose last entry always matches ``status``.
- History timestamps never decrease; a clock step backwards is clamped to
  the previous entry.
- A delivery without history reports ``pending`` at its shipping date.
"""

from __future__ import annotations

from datetime import datetime, time, timezone as dt_timezone
from typing import Any, Dict, List, Optional

from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.deliveries.constants import (
    HISTORY_TIMESTAMP_FORMAT,
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    DeliveryStatus,
)
from shared.domain.events import DomainEventMixin


def format_history_timestamp(moment: datetime) -> str:
    """Render an aware datetime as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC."""
    return moment.astimezone(dt_timezone.utc).strftime(HISTORY_TIMESTAMP_FORMAT)


class Delivery(DomainEventMixin, BaseModel):
    """Fulfilment record of an order."""

    order: models.OneToOneField = models.OneToOneField(
        "orders.Order",
        on_delete=models.PROTECT,
        related_name="delivery",
    )
    status: models.CharField = models.CharField(
        max_length=20,
        choices=DeliveryStatus.choices,
        default=DeliveryStatus.PENDING,
    )
    shipping_date: models.DateField = models.DateField()
    driver: models.ForeignKey = models.ForeignKey(
        "drivers.Driver",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        default=None,
        related_name="deliveries",
    )
    status_history: models.JSONField = models.JSONField(default=list, blank=True)

    class Meta:
        db_table = "delivery"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status"], name="delivery_status_idx"),
        ]

    # ------------------------------------------------------------------
    # State Machine helpers
    # ------------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return str(self.status) in TERMINAL_STATES

    def can_transition_to(self, new_status: str) -> bool:
        return str(new_status) in VALID_TRANSITIONS.get(str(self.status), frozenset())

    # ------------------------------------------------------------------
    # Status history
    # ------------------------------------------------------------------

    def history_entries(self) -> List[Dict[str, Any]]:
        """The stored history, or the implicit ``pending`` entry when empty."""
        if self.status_history:
            return [dict(entry) for entry in self.status_history]
        shipped = datetime.combine(self.shipping_date, time.min, tzinfo=dt_timezone.utc)
        return [
            {
                "status": DeliveryStatus.PENDING.value,
                "timestamp": format_history_timestamp(shipped),
            }
        ]

    def record_status(self, status: str, at: Optional[datetime] = None) -> Dict[str, Any]:
        """Set ``status`` and append the matching history entry.

        The implicit initial entry is materialised first so the stored
        history always starts with ``pending``.
        """
        history = self.history_entries()
        timestamp = format_history_timestamp(at or timezone.now())
        # Same fixed-width format, so string order is time order.
        if history and timestamp < history[-1]["timestamp"]:
            timestamp = history[-1]["timestamp"]

        entry = {"status": str(status), "timestamp": timestamp}
        history.append(entry)
        self.status_history = history
        self.status = str(status)
        return entry

    def __str__(self) -> str:
        return f"delivery:{self.id} order:{self.order_id} ({self.status})"
