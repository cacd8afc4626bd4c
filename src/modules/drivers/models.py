"""Driver model.

A row in ``drivers`` *is* the driver role of an account.  Matching reads
the availability flag and the last reported position; nothing is cached.
"""

from __future__ import annotations

from decimal import Decimal

from django.db import models

from modules.core.models import BaseModel


class Driver(BaseModel):
    """Driver profile attached to an account."""

    user = models.OneToOneField(
        "accounts.Account",
        on_delete=models.CASCADE,
        related_name="driver_profile",
    )
    vehicle_type = models.CharField(max_length=50, blank=True, default="")
    is_available = models.BooleanField(default=True)
    latitude = models.FloatField(null=True, blank=True, default=None)
    longitude = models.FloatField(null=True, blank=True, default=None)
    service_area = models.CharField(max_length=255, blank=True, default="")
    rating = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal("0.00"),
    )

    class Meta:
        db_table = "drivers"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["is_available"], name="drivers_available_idx"),
            models.Index(fields=["-rating"], name="drivers_rating_idx"),
        ]

    @property
    def has_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def __str__(self) -> str:
        return f"driver:{self.id} (user {self.user_id})"
