"""Base repository contract shared by every module.

Services receive repositories through their constructor and only see
these abstractions; the Django ORM stays behind the concrete classes.
Look-ups return ``None`` for missing rows and the service decides which
``NotFound`` to raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Persistence of one aggregate type ``T`` (``Order``, ``Delivery``…)."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """The entity with primary key *id*, or ``None``."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert or update *entity*, recording its pending domain events."""
