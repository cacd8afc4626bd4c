"""Helpers turning request validation failures into ``InvalidArgument``.

Views validate the raw payload with a DRF serializer (presence and basic
types) and then build a Pydantic DTO (business validation).  Both kinds of
failure reach the client as a 400 ``{"error": ...}`` body.
"""

from __future__ import annotations

from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers

from modules.core.exceptions import InvalidArgument

D = TypeVar("D", bound=BaseModel)

_MISSING_CODES = {"required", "blank", "null"}


def require_valid(serializer: serializers.Serializer) -> Dict[str, Any]:
    """Return ``validated_data`` or raise ``InvalidArgument``.

    Missing fields are reported together, by their request names.
    """
    if serializer.is_valid():
        return serializer.validated_data

    missing = [
        field
        for field, errors in serializer.errors.items()
        if any(getattr(error, "code", None) in _MISSING_CODES for error in errors)
    ]
    if missing:
        raise InvalidArgument(f"Missing required fields: {', '.join(missing)}")

    details = "; ".join(
        f"{field}: {' '.join(str(error) for error in errors)}"
        for field, errors in serializer.errors.items()
    )
    raise InvalidArgument(f"Invalid request: {details}")


def build_dto(dto_class: Type[D], **data: Any) -> D:
    """Instantiate a Pydantic DTO, translating its errors to ``InvalidArgument``."""
    try:
        return dto_class(**data)
    except PydanticValidationError as exc:
        raise InvalidArgument(describe_validation_error(exc)) from exc


def describe_validation_error(exc: PydanticValidationError) -> str:
    messages = []
    for error in exc.errors():
        message = str(error.get("msg", ""))
        if error.get("type") == "value_error":
            # Raised by our own validators: the message is already complete.
            messages.append(message.removeprefix("Value error, "))
            continue
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)
