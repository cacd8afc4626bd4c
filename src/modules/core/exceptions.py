"""Error taxonomy shared by every module.

Module exceptions subclass one of these so the API boundary
(``modules.core.exception_handler``) can map them to an HTTP status
without knowing each module's vocabulary.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for errors raised deliberately by the service layer."""

    status_code = 500
    default_message = "Request failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidArgument(DomainError):
    """Malformed or missing input."""

    status_code = 400
    default_message = "Invalid argument."


class Unauthenticated(DomainError):
    """The presented credentials do not identify an account."""

    status_code = 401
    default_message = "Invalid credentials"


class NotFound(DomainError):
    """A referenced entity does not exist."""

    status_code = 404
    default_message = "Not found."


class Conflict(DomainError):
    """The entity already exists or already holds the requested state."""

    status_code = 409
    default_message = "Conflict."


class TransactionFailed(DomainError):
    """An atomic write could not complete and was rolled back."""

    status_code = 500
    default_message = "Transaction failed."


class UpstreamFailure(DomainError):
    """An external collaborator was unreachable, slow or answered badly."""

    status_code = 500
    default_message = "Upstream service failure."
