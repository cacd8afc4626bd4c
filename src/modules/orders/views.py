"""Order API views.

Exposes the ``OrderService`` via HTTP.  Domain exceptions propagate to
``modules.core.exception_handler``; views never swallow them.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.mixins import ListModelMixin
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.accounts.repositories.django_repository import AccountDjangoRepository
from modules.core.validation import build_dto, require_valid
from modules.deliveries.repositories.django_repository import DeliveryDjangoRepository
from modules.orders.dtos import CreateOrderDTO, PendingJobsQuery, PriceOrderDTO
from modules.orders.filters import OrderFilter
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    CreateOrderSerializer,
    CustomerOrderSerializer,
    PendingJobSerializer,
    PendingJobsParamsSerializer,
    PriceOrderSerializer,
)
from modules.orders.services import OrderService


def _order_service() -> OrderService:
    return OrderService(
        order_repository=OrderDjangoRepository(),
        delivery_repository=DeliveryDjangoRepository(),
        account_repository=AccountDjangoRepository(),
    )


class CreateOrderView(APIView):
    """POST /api/delivery/order/

    Accepts JSON or multipart (with an optional ``image`` file).
    """

    parser_classes = [MultiPartParser, FormParser, JSONParser]
    throttle_scope = "order_creation"

    def post(self, request: Request) -> Response:
        data = require_valid(CreateOrderSerializer(data=request.data))
        dto = build_dto(
            CreateOrderDTO,
            customer_id=data["customerId"],
            object_type=data["objectType"],
            source=data["source"],
            destination=data["destination"],
            shipping_date=data["shippingDate"],
            description=data.get("description"),
        )
        order, delivery = _order_service().create_order(dto, image=data.get("image"))
        product = order.product
        return Response(
            {
                "orderId": order.id,
                "deliveryId": delivery.id,
                "imagePath": product.image_path if product else None,
            },
            status=status.HTTP_201_CREATED,
        )


class PriceOrderView(APIView):
    """POST /api/delivery/{order_id}/price/ {price}

    Late pricing: sets the product price and the order total.
    """

    def post(self, request: Request, order_id: int) -> Response:
        data = require_valid(PriceOrderSerializer(data=request.data))
        dto = build_dto(PriceOrderDTO, order_id=order_id, price=data["price"])
        order = _order_service().price_order(dto)
        return Response({"orderId": order.id, "total": str(order.total)})


class CustomerOrdersView(ListModelMixin, GenericAPIView):
    """GET /api/delivery/user-orders/{customer_id}/

    Optional filters: ``status``, ``deliveryStatus``, ``start_date``,
    ``end_date``.
    """

    serializer_class = CustomerOrderSerializer
    filterset_class = OrderFilter
    filter_backends = [DjangoFilterBackend]

    def get_queryset(self):
        return _order_service().list_customer_orders(self.kwargs["customer_id"])

    def get(self, request: Request, customer_id: int) -> Response:
        return self.list(request)


class InTransitOrdersView(ListModelMixin, GenericAPIView):
    """GET /api/delivery/{customer_id}/in-transit/"""

    serializer_class = CustomerOrderSerializer
    filter_backends: list = []

    def get_queryset(self):
        return _order_service().list_in_transit_orders(self.kwargs["customer_id"])

    def get(self, request: Request, customer_id: int) -> Response:
        return self.list(request)


class PendingJobsView(ListModelMixin, GenericAPIView):
    """GET /api/delivery-agent/orders/?source="""

    serializer_class = PendingJobSerializer
    filter_backends: list = []

    def get_queryset(self):
        params = require_valid(
            PendingJobsParamsSerializer(data=self.request.query_params)
        )
        query = build_dto(PendingJobsQuery, source=params.get("source") or None)
        return _order_service().list_pending_jobs(query)

    def get(self, request: Request) -> Response:
        return self.list(request)
