"""Delivery domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import Conflict, InvalidArgument, NotFound


class DeliveryNotFound(NotFound):
    """No delivery exists for the requested order."""

    default_message = "Delivery not found"


class InvalidStatusTransition(InvalidArgument):
    """The transition is not allowed by the delivery state machine."""


class DriverAlreadyAssigned(Conflict):
    """The delivery already has a driver."""
