"""Order and Product models.

Business rules implemented:
- An order, its product and its delivery are created in one transaction
  (see ``OrderService.create_order``).
- Customer FK uses PROTECT: orders outlive nothing they reference.
- ``total`` may stay at zero until the order is priced.
- ``payment_id`` stays NULL until a payment is initiated.
- Order status moves to ``delivered`` only through the delivery lifecycle.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import OrderStatus, PaymentStatus
from shared.domain.events import DomainEventMixin


class Order(DomainEventMixin, BaseModel):
    """Order aggregate root.

    ``created_at`` is the order date exposed to clients as ``date``.
    """

    customer: models.ForeignKey = models.ForeignKey(
        "accounts.Account",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    status: models.CharField = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
    )
    total: models.DecimalField = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    source: models.CharField = models.CharField(max_length=255)
    destination: models.CharField = models.CharField(max_length=255)
    payment_id: models.CharField = models.CharField(  # noqa: DJ01
        max_length=255,
        null=True,
        blank=True,
        default=None,
        unique=True,
    )
    payment_status: models.CharField = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.UNPAID,
    )

    class Meta:
        db_table = "customerorder"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]

    @property
    def product(self) -> Optional[Product]:
        """The order's product (one per order); uses the prefetch cache."""
        return next(iter(self.products.all()), None)

    def __str__(self) -> str:
        return f"order:{self.id} ({self.status})"


class Product(BaseModel):
    """The object being shipped."""

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="products",
    )
    object_type: models.CharField = models.CharField(max_length=100)
    price: models.DecimalField = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
    )
    description: models.TextField = models.TextField(  # noqa: DJ01
        null=True, blank=True, default=None
    )
    image_path: models.CharField = models.CharField(  # noqa: DJ01
        max_length=255, null=True, blank=True, default=None
    )

    class Meta:
        db_table = "product"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.object_type} (order {self.order_id})"
