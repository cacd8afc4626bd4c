"""Payment DTOs (Pydantic v2, immutable)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class InitiatePaymentDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_id: int

    @field_validator("order_id", mode="before")
    @classmethod
    def positive_integer(cls, v: Any) -> int:
        try:
            parsed = int(str(v).strip())
        except (TypeError, ValueError):
            raise ValueError("Invalid order ID") from None
        if isinstance(v, bool) or parsed < 1:
            raise ValueError("Invalid order ID")
        return parsed


class PaymentWebhookDTO(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    payment_ref: str

    @field_validator("payment_ref")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("Missing payment reference")
        return v
