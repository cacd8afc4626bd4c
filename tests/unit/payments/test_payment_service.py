"""Unit tests for PaymentService.

Covers:
- Amount conversion to minor units and refusal of non-payable orders
- Gateway failure leaves the order untouched
- Webhook: paid / failed / still pending, replay idempotence, delivery advance
"""

from decimal import Decimal

import httpx
import pytest

from modules.core.models import OutboxEvent
from modules.deliveries.models import Delivery
from modules.deliveries.repositories.django_repository import DeliveryDjangoRepository
from modules.deliveries.services import DeliveryService
from modules.drivers.repositories.django_repository import DriverDjangoRepository
from modules.orders.exceptions import OrderNotFound
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.payments.dtos import InitiatePaymentDTO, PaymentWebhookDTO
from modules.payments.exceptions import (
    InvalidPaymentAmount,
    OrderNotPayable,
    PaymentGatewayError,
)
from modules.payments.gateway import GatewayConfig, PaymentGatewayClient
from modules.payments.services import PaymentService

pytestmark = pytest.mark.unit

CONFIG = GatewayConfig(
    base_url="https://gateway.test/api/v2",
    api_key="test-api-key",
    merchant_id="merchant-test",
    return_url="http://localhost:3000/payment",
)


class FakeGateway:
    """Records calls and answers with canned values."""

    def __init__(self, status="completed"):
        self.status = status
        self.init_calls = []

    def init_payment(self, **kwargs):
        from modules.payments.gateway import PaymentSession

        self.init_calls.append(kwargs)
        return PaymentSession(payment_id="pay-123", payment_url="https://pay.test/123")

    def get_payment_status(self, payment_id):
        return self.status


def _service(gateway):
    order_repository = OrderDjangoRepository()
    return PaymentService(
        order_repository=order_repository,
        delivery_service=DeliveryService(
            delivery_repository=DeliveryDjangoRepository(),
            order_repository=order_repository,
            driver_repository=DriverDjangoRepository(),
        ),
        gateway=gateway,
        minor_units=100,
    )


@pytest.fixture()
def payable_order(make_order):
    return make_order(total=Decimal("45.50"))


class TestInitiatePayment:
    def test_converts_total_to_minor_units(self, payable_order):
        gateway = FakeGateway()

        session = _service(gateway).initiate_payment(
            InitiatePaymentDTO(order_id=payable_order.id)
        )

        assert session.payment_id == "pay-123"
        assert gateway.init_calls[0]["amount"] == 4550
        payable_order.refresh_from_db()
        assert payable_order.payment_id == "pay-123"
        assert payable_order.payment_status == "initiated"

    def test_zero_total_is_refused(self, make_order):
        order = make_order()

        with pytest.raises(InvalidPaymentAmount) as exc_info:
            _service(FakeGateway()).initiate_payment(InitiatePaymentDTO(order_id=order.id))
        assert str(exc_info.value) == "Invalid amount: 0"

    def test_cancelled_order_is_refused(self, payable_order):
        payable_order.status = "cancelled"
        payable_order.save()

        with pytest.raises(OrderNotPayable):
            _service(FakeGateway()).initiate_payment(
                InitiatePaymentDTO(order_id=payable_order.id)
            )

    def test_unknown_order(self):
        with pytest.raises(OrderNotFound) as exc_info:
            _service(FakeGateway()).initiate_payment(InitiatePaymentDTO(order_id=999))
        assert str(exc_info.value) == "No order found with ID: 999"

    def test_gateway_timeout_leaves_order_untouched(self, payable_order):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        gateway = PaymentGatewayClient(CONFIG, transport=httpx.MockTransport(handler))

        with pytest.raises(PaymentGatewayError):
            _service(gateway).initiate_payment(
                InitiatePaymentDTO(order_id=payable_order.id)
            )

        payable_order.refresh_from_db()
        assert payable_order.payment_id is None
        assert payable_order.payment_status == "unpaid"


class TestHandleWebhook:
    @pytest.fixture()
    def initiated_order(self, payable_order):
        payable_order.payment_id = "pay-123"
        payable_order.payment_status = "initiated"
        payable_order.save()
        return payable_order

    def test_paid_advances_delivery(self, initiated_order):
        order = _service(FakeGateway("completed")).handle_webhook(
            PaymentWebhookDTO(payment_ref="pay-123")
        )

        assert order.payment_status == "paid"
        assert Delivery.objects.get(order=initiated_order).status == "assigned"
        assert OutboxEvent.objects.filter(event_type="PaymentConfirmed").count() == 1

    def test_replay_is_idempotent(self, initiated_order):
        service = _service(FakeGateway("completed"))
        service.handle_webhook(PaymentWebhookDTO(payment_ref="pay-123"))
        history = Delivery.objects.get(order=initiated_order).status_history

        order = service.handle_webhook(PaymentWebhookDTO(payment_ref="pay-123"))

        assert order.payment_status == "paid"
        assert Delivery.objects.get(order=initiated_order).status_history == history
        assert OutboxEvent.objects.filter(event_type="PaymentConfirmed").count() == 1

    def test_failed_payment(self, initiated_order):
        order = _service(FakeGateway("expired")).handle_webhook(
            PaymentWebhookDTO(payment_ref="pay-123")
        )

        assert order.payment_status == "failed"
        assert Delivery.objects.get(order=initiated_order).status == "pending"

    def test_pending_payment_left_alone(self, initiated_order):
        order = _service(FakeGateway("pending")).handle_webhook(
            PaymentWebhookDTO(payment_ref="pay-123")
        )

        assert order.payment_status == "initiated"

    def test_unknown_reference(self):
        with pytest.raises(OrderNotFound):
            _service(FakeGateway()).handle_webhook(PaymentWebhookDTO(payment_ref="nope"))
