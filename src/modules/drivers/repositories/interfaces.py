"""Driver repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.drivers.models import Driver


class IDriverRepository(IRepository["Driver"]):
    """Repository contract for drivers."""

    @abstractmethod
    def get_for_update(self, id: int) -> Optional[Driver]:
        """Retrieve a driver with a row-level lock (``SELECT FOR UPDATE``)."""

    @abstractmethod
    def list_available_with_position(self) -> List[Driver]:
        """Available drivers that reported a position, ordered by id."""

    @abstractmethod
    def search_by_area(
        self, source: str, vehicle_type: Optional[str], limit: int
    ) -> List[Driver]:
        """Available drivers whose service area contains *source*.

        Ordered by rating (highest first), then id.
        """

    @abstractmethod
    def set_availability(self, driver: Driver, is_available: bool) -> None:
        """Persist the availability flag of an already locked driver."""
