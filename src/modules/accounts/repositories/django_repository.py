"""Django ORM implementation of the Account repository.

Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising; the Service Layer decides how to translate a missing
entity into an API error.
"""

from __future__ import annotations

from typing import Dict, Optional, Type

import structlog
from django.db import models, transaction

from modules.accounts.constants import Role
from modules.accounts.models import Account, Administrator
from modules.accounts.repositories.interfaces import IAccountRepository
from modules.drivers.models import Driver

logger = structlog.get_logger(__name__)


class AccountDjangoRepository(IAccountRepository):
    """Concrete Account repository backed by Django ORM."""

    # Each role maps to one fixed side table; never built from user input.
    ROLE_MODELS: Dict[Role, Type[models.Model]] = {
        Role.DRIVER: Driver,
        Role.ADMIN: Administrator,
    }

    def get_by_id(self, id: int) -> Optional[Account]:
        """Retrieve a live account by primary key."""
        try:
            return Account.objects.alive().filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def get_by_email(self, email: str) -> Optional[Account]:
        return Account.objects.filter(email__iexact=email).first()

    def list_with_roles(self) -> "models.QuerySet[Account]":
        return (
            Account.objects.alive()
            .select_related("driver_profile", "admin_profile")
            .order_by("name", "id")
        )

    @transaction.atomic
    def save(self, entity: Account) -> Account:
        is_new = entity._state.adding
        entity.save()
        logger.info("account.saved", account_id=entity.id, is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        account = self.get_by_id(id)
        if not account:
            return False
        account.delete()
        logger.info("account.soft_deleted", account_id=id)
        return True

    # ------------------------------------------------------------------
    # Role side tables
    # ------------------------------------------------------------------

    def has_role(self, account: Account, role: Role) -> bool:
        return self.ROLE_MODELS[role].objects.filter(user=account).exists()

    @transaction.atomic
    def add_role(self, account: Account, role: Role) -> None:
        self.ROLE_MODELS[role].objects.create(user=account)
        logger.info("account.role_added", account_id=account.id, role=str(role))
