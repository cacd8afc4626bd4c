"""Asynchronous tasks of the core module."""

from __future__ import annotations

import structlog
from celery import shared_task
from django.db import transaction

from modules.core.models import EventStatus, OutboxEvent
from shared.domain.events import event_from_payload
from shared.infrastructure.bus import event_bus

logger = structlog.get_logger(__name__)


@shared_task(name="core.publish_outbox_events")
def publish_outbox_events(batch_size: int = 100) -> dict:
    """Hand committed ``PENDING`` outbox rows to the in-process event bus.

    A failing event is marked ``FAILED`` and the batch carries on with the
    next row; failures are retried by an operator, not by this task.
    """
    published = 0
    failed = 0

    with transaction.atomic():
        pending = list(
            OutboxEvent.objects.select_for_update()
            .filter(status=EventStatus.PENDING)
            .order_by("created_at")[:batch_size]
        )
        for outbox_event in pending:
            log = logger.bind(
                outbox_id=str(outbox_event.id),
                event_type=outbox_event.event_type,
                aggregate_id=outbox_event.aggregate_id,
            )
            try:
                event = event_from_payload(
                    outbox_event.event_type, outbox_event.payload
                )
                event_bus.publish(event)
            except Exception as exc:
                outbox_event.mark_as_failed(str(exc))
                failed += 1
                log.error("outbox.publish_failed", error=str(exc))
                continue
            outbox_event.mark_as_published()
            published += 1

    logger.info("outbox.batch_published", published=published, failed=failed)
    return {"published": published, "failed": failed}
