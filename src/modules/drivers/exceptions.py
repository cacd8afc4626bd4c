"""Driver domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import Conflict, NotFound


class DriverNotFound(NotFound):
    """The requested driver does not exist."""


class DriverUnavailable(Conflict):
    """The driver exists but is not available for a new delivery."""
