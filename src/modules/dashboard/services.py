"""Dashboard statistics for administrators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List

import structlog

if TYPE_CHECKING:
    from modules.dashboard.repositories import DashboardDjangoRepository

logger = structlog.get_logger(__name__)

RECENT_DELIVERIES_LIMIT = 5
TOP_DRIVERS_LIMIT = 5


@dataclass(frozen=True)
class DashboardStats:
    stats: Dict[str, Any]
    recent_deliveries: List[Dict[str, Any]]
    top_drivers: List[Dict[str, Any]]


class DashboardService:
    def __init__(self, repository: DashboardDjangoRepository) -> None:
        self._repo = repository

    def get_stats(self) -> DashboardStats:
        stats = {
            "drivers": self._repo.count_drivers(),
            "customers": self._repo.count_ordering_customers(),
            "users": self._repo.count_users(),
            "deliveries": self._repo.delivery_counts(),
        }
        logger.info(
            "dashboard.computed",
            drivers=stats["drivers"],
            customers=stats["customers"],
            users=stats["users"],
        )
        return DashboardStats(
            stats=stats,
            recent_deliveries=self._repo.recent_deliveries(RECENT_DELIVERIES_LIMIT),
            top_drivers=self._repo.top_drivers(TOP_DRIVERS_LIMIT),
        )
