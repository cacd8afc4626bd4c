"""Account repository interface.

Extends ``IRepository[Account]`` with the look-ups the identity
collaborator needs: email uniqueness, role side tables and search.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from django.db import models

    from modules.accounts.constants import Role
    from modules.accounts.models import Account


class IAccountRepository(IRepository["Account"]):
    """Repository contract for the Account aggregate."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Account]:
        """Retrieve an account by email address (soft-deleted included)."""

    @abstractmethod
    def list_with_roles(self) -> "models.QuerySet[Account]":
        """Live accounts with their role side tables joined."""

    @abstractmethod
    def has_role(self, account: Account, role: Role) -> bool:
        """Return ``True`` if the account already holds *role*."""

    @abstractmethod
    def add_role(self, account: Account, role: Role) -> None:
        """Insert the side-table row for *role*."""

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Soft-delete an account by ID."""
