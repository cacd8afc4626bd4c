"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderDTO``: input for order creation.
- ``PendingJobsQuery``: input for the delivery-agent job board.
- ``PriceOrderDTO``: input for late pricing of an order.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Validates:
    - ``customer_id`` is a positive integer.
    - ``object_type``, ``source`` and ``destination`` are non-blank.
    - ``shipping_date`` is a calendar date (``YYYY-MM-DD``) or an ISO
      datetime, of which only the date is kept.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    customer_id: int = Field(gt=0)
    object_type: str = Field(min_length=1, max_length=100)
    source: str = Field(min_length=1, max_length=255)
    destination: str = Field(min_length=1, max_length=255)
    shipping_date: date
    description: Optional[str] = None

    @field_validator("shipping_date", mode="before")
    @classmethod
    def parse_shipping_date(cls, v: Any) -> date:
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, date):
            return v
        text = str(v).strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError as exc:
            raise ValueError("Invalid shipping date.") from exc

    @field_validator("description")
    @classmethod
    def blank_description_is_absent(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class PendingJobsQuery(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    source: Optional[str] = None


class PriceOrderDTO(BaseModel):
    """Late pricing request: a positive amount with at most two decimals."""

    model_config = ConfigDict(frozen=True)

    order_id: int = Field(gt=0)
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
