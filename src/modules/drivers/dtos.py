"""Driver matching DTOs (Pydantic v2, immutable)."""

from __future__ import annotations

from typing import Optional

from django.conf import settings
from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.drivers.constants import VEHICLE_TYPE_WILDCARDS


def _default_radius() -> float:
    return settings.MATCHING_DEFAULT_RADIUS_KM


def _default_limit() -> int:
    return settings.MATCHING_RESULT_LIMIT


class NearestDriversQuery(BaseModel):
    """Validated input of the nearest-driver search.

    ``allow_inf_nan=False`` rejects ``nan`` and ``inf`` coordinates, which
    would otherwise slip through the range checks.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    radius_km: float = Field(default_factory=_default_radius, gt=0)
    limit: int = Field(default_factory=_default_limit, gt=0)


class SearchDriversQuery(BaseModel):
    """Validated input of the service-area search."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    source: str = Field(min_length=1)
    destination: Optional[str] = None
    vehicle_type: Optional[str] = None

    @field_validator("destination")
    @classmethod
    def blank_destination_is_absent(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @field_validator("vehicle_type")
    @classmethod
    def wildcard_is_absent(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v.lower() in VEHICLE_TYPE_WILDCARDS:
            return None
        return v
