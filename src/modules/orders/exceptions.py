"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
``modules.core.exception_handler`` turns them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import InvalidArgument, NotFound, TransactionFailed


class OrderNotFound(NotFound):
    """The requested order does not exist."""

    default_message = "Order not found"


class CustomerNotFound(NotFound):
    """The referenced customer does not exist or was deleted."""


class OrderCreationFailed(TransactionFailed):
    """The order, product and delivery rows could not be written together."""

    default_message = "Failed to create delivery"


class OrderNotPriceable(InvalidArgument):
    """The order is cancelled or its payment has already started."""
