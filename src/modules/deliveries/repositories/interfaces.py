"""Delivery repository interface.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import date
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.deliveries.models import Delivery
    from modules.orders.models import Order


class IDeliveryRepository(IRepository["Delivery"]):
    """Repository contract for deliveries."""

    @abstractmethod
    def create_for_order(self, order: Order, shipping_date: date) -> Delivery:
        """Insert the ``pending`` delivery of a freshly created order."""

    @abstractmethod
    def get_by_order_id(self, order_id: int) -> Optional[Delivery]:
        """Delivery of an order with order, product and driver eager-loaded."""

    @abstractmethod
    def get_for_update_by_order_id(self, order_id: int) -> Optional[Delivery]:
        """Delivery and its order, both locked (``SELECT FOR UPDATE``)."""
