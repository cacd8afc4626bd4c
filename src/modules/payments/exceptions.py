"""Payment exceptions."""

from __future__ import annotations

from modules.core.exceptions import InvalidArgument, UpstreamFailure


class PaymentGatewayError(UpstreamFailure):
    """The gateway was unreachable, timed out or answered with an error."""

    default_message = "Payment initiation failed"


class InvalidPaymentAmount(InvalidArgument):
    """The order total converts to a non-positive amount."""


class OrderNotPayable(InvalidArgument):
    """The order can no longer be paid (cancelled or already paid)."""
