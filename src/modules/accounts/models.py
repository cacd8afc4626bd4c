"""Account and Administrator models.

Business rules implemented:
- Email must be unique in the system (enforced by a UNIQUE index and by
  the service layer, which answers 409 before the database has to).
- Passwords are stored only as Django password hashes.
- Accounts are soft-deleted so orders keep a valid customer reference.
- Roles beyond the registration role live in side tables (``drivers``,
  ``admins``); a row in the side table *is* the role.
"""

from __future__ import annotations

import structlog
from django.contrib.auth.hashers import check_password, make_password
from django.db import models

from modules.accounts.constants import AccountRole
from modules.core.models import BaseModel, SoftDeleteModel

logger = structlog.get_logger(__name__)


class Account(SoftDeleteModel):
    """User account of the brokerage (customer, delivery man or admin)."""

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)
    phone = models.CharField(max_length=20, blank=True, default="")
    location = models.CharField(max_length=255, blank=True, default="")
    role = models.CharField(
        max_length=20,
        choices=AccountRole.choices,
        default=AccountRole.CLIENT,
    )
    password_hash = models.CharField(max_length=128)
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "users"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="users_created_idx"),
            models.Index(fields=["name"], name="users_name_idx"),
        ]

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    def set_password(self, raw_password: str) -> None:
        self.password_hash = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        return check_password(raw_password, self.password_hash)

    # ------------------------------------------------------------------
    # Roles
    # ------------------------------------------------------------------

    @property
    def is_driver(self) -> bool:
        return hasattr(self, "driver_profile")

    @property
    def is_admin(self) -> bool:
        return hasattr(self, "admin_profile")

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


class Administrator(BaseModel):
    """Side table granting the admin role to an account."""

    user = models.OneToOneField(
        "accounts.Account",
        on_delete=models.CASCADE,
        related_name="admin_profile",
    )

    class Meta:
        db_table = "admins"

    def __str__(self) -> str:
        return f"admin:{self.user_id}"
