"""Account service layer (Use Cases).

The identity collaborator of the brokerage: registration, credential
checks, password reset, role assignment and removal.  Other modules
only ask it whether an account exists (``get_account``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.accounts.constants import AccountRole, Role
from modules.accounts.exceptions import (
    AccountAlreadyExists,
    AccountNotFound,
    InvalidCredentials,
    RoleAlreadyAssigned,
)
from modules.accounts.models import Account

if TYPE_CHECKING:
    from modules.accounts.dtos import (
        AssignRoleDTO,
        LoginDTO,
        RegisterAccountDTO,
        ResetPasswordDTO,
    )
    from modules.accounts.repositories.interfaces import IAccountRepository

logger = structlog.get_logger(__name__)


class AccountService:
    """Application service for Account use-cases.

    Receives an ``IAccountRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IAccountRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def register(self, dto: RegisterAccountDTO) -> Account:
        """Create an account; delivery men also get a driver profile.

        Raises:
            AccountAlreadyExists: the email is already registered.
        """
        log = logger.bind(role=str(dto.role))

        if self._repo.get_by_email(dto.email):
            log.warning("account.duplicate_email")
            raise AccountAlreadyExists("Email already registered")

        account = Account(
            name=dto.name,
            email=dto.email,
            phone=dto.phone,
            location=dto.location,
            role=str(dto.role),
        )
        account.set_password(dto.password)
        account = self._repo.save(account)

        if account.role == AccountRole.DELIVERY_MAN:
            self._repo.add_role(account, Role.DRIVER)

        log.info("account.registered", account_id=account.id)
        return account

    def authenticate(self, dto: LoginDTO) -> Account:
        """Return the account whose email and password match.

        Deleted accounts cannot log in.

        Raises:
            InvalidCredentials: unknown email or wrong password.
        """
        account = self._repo.get_by_email(dto.email)
        if (
            account is None
            or account.is_deleted
            or not account.check_password(dto.password)
        ):
            logger.warning("account.login_failed")
            raise InvalidCredentials("Invalid credentials")

        logger.info("account.logged_in", account_id=account.id)
        return account

    @transaction.atomic
    def reset_password(self, dto: ResetPasswordDTO) -> None:
        """Replace the password hash of a live account.

        Raises:
            AccountNotFound: no live account with that email.
        """
        account = self._repo.get_by_email(dto.email)
        if account is None or account.is_deleted:
            raise AccountNotFound("User not found")

        account.set_password(dto.new_password)
        self._repo.save(account)
        logger.info("account.password_reset", account_id=account.id)

    @transaction.atomic
    def assign_role(self, dto: AssignRoleDTO) -> None:
        """Grant a side-table role to an existing account.

        Raises:
            AccountNotFound: no live account with that id.
            RoleAlreadyAssigned: the account already holds the role.
        """
        account = self.get_account(dto.user_id)
        log = logger.bind(account_id=account.id, role=str(dto.role))

        if self._repo.has_role(account, dto.role):
            log.warning("account.role_already_assigned")
            raise RoleAlreadyAssigned(f"User is already a {dto.role}")

        self._repo.add_role(account, dto.role)
        log.info("account.role_assigned")

    @transaction.atomic
    def delete_account(self, id: int) -> None:
        """Soft-delete an account.

        Raises:
            AccountNotFound: no live account with that id.
        """
        if not self._repo.delete(id):
            raise AccountNotFound(f"User {id} not found")
        logger.info("account.deleted", account_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_account(self, id: int) -> Account:
        """Identity look-up used by the other modules.

        Raises:
            AccountNotFound: no live account with that id.
        """
        account = self._repo.get_by_id(id)
        if not account:
            raise AccountNotFound(f"User {id} not found")
        return account

    def search_queryset(self):
        """Base queryset for user search; filtering is done by ``AccountFilter``."""
        return self._repo.list_with_roles()
