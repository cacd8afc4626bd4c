import time
import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class CorrelationIdMiddleware:
    """Tags every log line of a request with one correlation id.

    The id comes from ``X-Request-ID`` when the caller (mobile app,
    dashboard, payment gateway) sends one and is generated otherwise.  It
    is bound into structlog's context together with the method and path,
    and echoed on the response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=cid, method=request.method, path=request.path
        )
        logger.info("request_started")
        started = time.monotonic()

        response = self.get_response(request)

        duration_ms = round((time.monotonic() - started) * 1000, 2)
        log = logger.error if response.status_code >= 500 else logger.info
        log("request_finished", status_code=response.status_code, duration_ms=duration_ms)

        response[REQUEST_ID_HEADER] = cid
        return response
