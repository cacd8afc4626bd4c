"""Order repository interface.

Extends ``IRepository[Order]`` with the methods the Order aggregate
needs: creation together with its product, payment look-up and the
read models of the reporting facade.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from django.db import models

    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its product.

        ``data`` must include ``customer_id``, ``source``, ``destination``
        and ``product`` (dict with ``object_type``, ``description``,
        ``image_path``).
        """

    @abstractmethod
    def get_for_update(self, id: int) -> Optional[Order]:
        """Retrieve an order with a row-level lock (``SELECT FOR UPDATE``)."""

    @abstractmethod
    def get_by_payment_id(self, payment_id: str) -> Optional[Order]:
        """Retrieve the order carrying a gateway payment reference."""

    @abstractmethod
    def get_for_update_by_payment_id(self, payment_id: str) -> Optional[Order]:
        """Retrieve and lock the order carrying a gateway payment reference."""

    @abstractmethod
    def list_for_customer(self, customer_id: int) -> "models.QuerySet[Order]":
        """Customer's orders, newest first, product and delivery eager-loaded."""

    @abstractmethod
    def list_in_transit(self, customer_id: int) -> "models.QuerySet[Order]":
        """Customer's orders whose delivery is ``in_transit``."""

    @abstractmethod
    def list_pending_jobs(self, source: Optional[str] = None) -> "models.QuerySet[Order]":
        """Orders whose delivery is ``pending``, optionally by source substring."""

    @abstractmethod
    def set_product_price(self, order: Order, price: Decimal) -> None:
        """Set the price of the order's product (caller holds the order lock)."""
