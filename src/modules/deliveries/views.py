"""Delivery API views.

Exposes ``DeliveryService`` over HTTP.  The ``order_id`` URL segment
is the order id: each order has exactly one delivery.
"""

from __future__ import annotations

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.validation import build_dto, require_valid
from modules.deliveries.dtos import AssignDriverDTO, CancelOrderDTO, UpdateStatusDTO
from modules.deliveries.repositories.django_repository import DeliveryDjangoRepository
from modules.deliveries.serializers import (
    AssignDriverSerializer,
    CancelOrderSerializer,
    DeliveryViewSerializer,
    UpdateStatusSerializer,
)
from modules.deliveries.services import DeliveryService
from modules.drivers.repositories.django_repository import DriverDjangoRepository
from modules.orders.repositories.django_repository import OrderDjangoRepository


def _delivery_service() -> DeliveryService:
    return DeliveryService(
        delivery_repository=DeliveryDjangoRepository(),
        order_repository=OrderDjangoRepository(),
        driver_repository=DriverDjangoRepository(),
    )


class CancelDeliveryView(APIView):
    """POST /api/delivery/cancel-delivery/ {orderId}"""

    def post(self, request: Request) -> Response:
        data = require_valid(CancelOrderSerializer(data=request.data))
        raw_id = data.get("orderId") or data.get("deliveryId")
        dto = build_dto(CancelOrderDTO, order_id=raw_id)
        _delivery_service().cancel_order(dto)
        return Response({"message": "Delivery cancelled successfully"})


class TrackDeliveryView(APIView):
    """GET /api/delivery/{order_id}/"""

    def get(self, request: Request, order_id: int) -> Response:
        delivery = _delivery_service().track_delivery(order_id)
        return Response(DeliveryViewSerializer(delivery).data)


class UpdateDeliveryStatusView(APIView):
    """POST /api/delivery/{order_id}/update-status/ {newStatus}"""

    def post(self, request: Request, order_id: int) -> Response:
        data = require_valid(UpdateStatusSerializer(data=request.data))
        dto = build_dto(UpdateStatusDTO, order_id=order_id, new_status=data["newStatus"])
        delivery = _delivery_service().update_status(dto)
        return Response(
            {
                "success": True,
                "newStatus": delivery.status,
                "updatedAt": delivery.updated_at,
            }
        )


class AssignDriverView(APIView):
    """POST /api/delivery/{order_id}/assign-driver/ {driverId}"""

    def post(self, request: Request, order_id: int) -> Response:
        data = require_valid(AssignDriverSerializer(data=request.data))
        dto = build_dto(AssignDriverDTO, order_id=order_id, driver_id=data["driverId"])
        service = _delivery_service()
        service.assign_driver(dto)
        delivery = service.track_delivery(order_id)
        return Response(DeliveryViewSerializer(delivery).data)
