"""Delivery DTOs for the Service Layer (Pydantic v2, immutable)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.deliveries.constants import DeliveryStatus


def _positive_id(value: Any, message: str) -> int:
    if isinstance(value, bool):
        raise ValueError(message)
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValueError(message) from None
    if parsed < 1:
        raise ValueError(message)
    return parsed


class CancelOrderDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_id: int

    @field_validator("order_id", mode="before")
    @classmethod
    def positive_integer(cls, v: Any) -> int:
        return _positive_id(v, "Invalid delivery ID")


class UpdateStatusDTO(BaseModel):
    """Status change request; ``new_status`` must be a ``DeliveryStatus``."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    order_id: int = Field(gt=0)
    new_status: str

    @field_validator("new_status")
    @classmethod
    def known_status(cls, v: str) -> str:
        if v not in DeliveryStatus.values:
            raise ValueError(f"Invalid status: {v}")
        return v


class AssignDriverDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_id: int = Field(gt=0)
    driver_id: int

    @field_validator("driver_id", mode="before")
    @classmethod
    def positive_driver_id(cls, v: Any) -> int:
        return _positive_id(v, "Invalid driver ID")
