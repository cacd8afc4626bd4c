"""Driver repositories package."""

from modules.drivers.repositories.django_repository import DriverDjangoRepository
from modules.drivers.repositories.interfaces import IDriverRepository

__all__ = ["IDriverRepository", "DriverDjangoRepository"]
