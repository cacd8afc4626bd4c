"""DRF exception handler: the request boundary for every API view.

Every failure leaves the API as a JSON object with an ``error`` field:

* ``DomainError`` subclasses → their own status code and message.
* DRF exceptions (validation, parse, auth, throttling) → DRF's status code,
  a summary ``error`` and the original payload under ``details``.
* Anything else → logged, 500 with a generic message; diagnostics are added
  only when ``DEBUG`` is on.
"""

from __future__ import annotations

from typing import Any, Dict

import structlog
from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

from modules.core.exceptions import DomainError

logger = structlog.get_logger(__name__)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if isinstance(exc, DomainError):
        set_rollback()
        logger.warning(
            "api.domain_error",
            view=view_name,
            error_type=type(exc).__name__,
            status_code=exc.status_code,
            message=str(exc),
        )
        return Response({"error": str(exc)}, status=exc.status_code)

    response = drf_exception_handler(exc, context)
    if response is not None:
        response.data = _error_body(response.data)
        return response

    logger.exception("api.unhandled_error", view=view_name)
    set_rollback()
    body: Dict[str, Any] = {"error": "Internal server error"}
    if settings.DEBUG:
        body["details"] = {"type": type(exc).__name__, "message": str(exc)}
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _error_body(data: Any) -> Dict[str, Any]:
    if isinstance(data, dict) and set(data) == {"detail"}:
        return {"error": str(data["detail"])}
    return {"error": "Invalid request.", "details": data}
