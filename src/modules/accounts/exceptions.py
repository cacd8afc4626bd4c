"""Account domain exceptions.

Raised by the Service Layer when business rules are violated.
The API boundary translates them into HTTP responses through the
taxonomy in ``modules.core.exceptions``.
"""

from __future__ import annotations

from modules.core.exceptions import Conflict, InvalidArgument, NotFound, Unauthenticated


class AccountAlreadyExists(Conflict):
    """An account with the same email already exists."""


class AccountNotFound(NotFound):
    """The requested account does not exist or has been soft-deleted."""


class RoleAlreadyAssigned(Conflict):
    """The account already holds the requested side-table role."""


class InvalidRole(InvalidArgument):
    """The requested role is not one of ``Role``."""


class InvalidCredentials(Unauthenticated):
    """Unknown email or wrong password; the two are not told apart."""
