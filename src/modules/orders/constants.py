"""Order domain constants."""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    CANCELLED = "cancelled", "Cancelled"
    DELIVERED = "delivered", "Delivered"


class PaymentStatus(models.TextChoices):
    UNPAID = "unpaid", "Unpaid"
    INITIATED = "initiated", "Initiated"
    PAID = "paid", "Paid"
    FAILED = "failed", "Failed"


# Relative to MEDIA_ROOT; served under MEDIA_URL.
UPLOAD_DIR = "uploads"
