"""Payment API views.

The webhook is called by the gateway itself, so it is public and
accepts both GET and POST like the gateway's notification modes.
"""

from __future__ import annotations

from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.validation import build_dto, require_valid
from modules.deliveries.repositories.django_repository import DeliveryDjangoRepository
from modules.deliveries.services import DeliveryService
from modules.drivers.repositories.django_repository import DriverDjangoRepository
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.payments.dtos import InitiatePaymentDTO, PaymentWebhookDTO
from modules.payments.gateway import GatewayConfig, PaymentGatewayClient
from modules.payments.serializers import InitiatePaymentSerializer, PaymentStatusSerializer
from modules.payments.services import PaymentService


def _payment_service() -> PaymentService:
    config = GatewayConfig.from_settings()
    order_repository = OrderDjangoRepository()
    return PaymentService(
        order_repository=order_repository,
        delivery_service=DeliveryService(
            delivery_repository=DeliveryDjangoRepository(),
            order_repository=order_repository,
            driver_repository=DriverDjangoRepository(),
        ),
        gateway=PaymentGatewayClient(config),
        minor_units=config.minor_units,
    )


class InitiatePaymentView(APIView):
    """POST /api/payments/initiate/ {orderId}"""

    throttle_scope = "payment_initiation"

    def post(self, request: Request) -> Response:
        data = require_valid(InitiatePaymentSerializer(data=request.data))
        dto = build_dto(InitiatePaymentDTO, order_id=data["orderId"])
        session = _payment_service().initiate_payment(dto)
        return Response(
            {
                "success": True,
                "paymentUrl": session.payment_url,
                "paymentId": session.payment_id,
            }
        )


class PaymentWebhookView(APIView):
    """GET|POST /api/payments/webhook/?payment_ref="""

    authentication_classes: list = []
    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        return self._handle(request.query_params.get("payment_ref"))

    def post(self, request: Request) -> Response:
        payment_ref = request.query_params.get("payment_ref")
        if not payment_ref and hasattr(request.data, "get"):
            payment_ref = request.data.get("payment_ref") or request.data.get(
                "paymentRef"
            )
        return self._handle(payment_ref)

    def _handle(self, payment_ref) -> Response:
        dto = build_dto(PaymentWebhookDTO, payment_ref=payment_ref or "")
        order = _payment_service().handle_webhook(dto)
        return Response(
            {
                "success": True,
                "orderId": order.id,
                "paymentStatus": order.payment_status,
            }
        )


class PaymentStatusView(APIView):
    """GET /api/payments/status/{order_id}/"""

    def get(self, request: Request, order_id: int) -> Response:
        order = _payment_service().get_order(order_id)
        return Response(PaymentStatusSerializer(order).data)
