"""Storage of order images through Django's storage API."""

from __future__ import annotations

import os
import time
from typing import Optional

import structlog
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import UploadedFile

from modules.orders.constants import UPLOAD_DIR

logger = structlog.get_logger(__name__)


def store_order_image(image: UploadedFile) -> str:
    """Save *image* as ``uploads/<epoch millis><ext>`` and return its path.

    The storage backend picks a free name if the millisecond collides.
    """
    extension = os.path.splitext(image.name or "")[1].lower()
    name = f"{UPLOAD_DIR}/{int(time.time() * 1000)}{extension}"
    stored = default_storage.save(name, image)
    logger.info("order.image_stored", path=stored, size=image.size)
    return stored


def discard_order_image(path: Optional[str]) -> None:
    """Remove an image stored for an order whose transaction rolled back."""
    if not path:
        return
    try:
        default_storage.delete(path)
    except OSError as exc:
        logger.warning("order.image_cleanup_failed", path=path, error=str(exc))
