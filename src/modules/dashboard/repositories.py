"""Read-only aggregate queries behind the admin dashboard."""

from __future__ import annotations

from typing import Any, Dict, List

from django.db.models import Count, F, Q

from modules.accounts.models import Account
from modules.deliveries.constants import DeliveryStatus
from modules.deliveries.models import Delivery
from modules.drivers.models import Driver
from modules.orders.models import Order


class DashboardDjangoRepository:
    def count_drivers(self) -> int:
        return Driver.objects.filter(user__deleted_at__isnull=True).count()

    def count_ordering_customers(self) -> int:
        return Order.objects.values("customer_id").distinct().count()

    def count_users(self) -> int:
        return Account.objects.alive().count()

    def delivery_counts(self) -> Dict[str, int]:
        """Deliveries per status; ``canceled`` counts failed deliveries."""
        return Delivery.objects.aggregate(
            pending=Count("id", filter=Q(status=DeliveryStatus.PENDING)),
            in_transit=Count("id", filter=Q(status=DeliveryStatus.IN_TRANSIT)),
            delivered=Count("id", filter=Q(status=DeliveryStatus.DELIVERED)),
            canceled=Count("id", filter=Q(status=DeliveryStatus.FAILED)),
        )

    def recent_deliveries(self, limit: int) -> List[Dict[str, Any]]:
        return list(
            Delivery.objects.order_by("-created_at", "-id").values(
                "order_id",
                "status",
                "created_at",
                customer_name=F("order__customer__name"),
            )[:limit]
        )

    def top_drivers(self, limit: int) -> List[Dict[str, Any]]:
        return list(
            Driver.objects.filter(user__deleted_at__isnull=True)
            .order_by("-rating", "id")
            .values(
                "id",
                "vehicle_type",
                "rating",
                name=F("user__name"),
            )[:limit]
        )
