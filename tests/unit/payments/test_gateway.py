"""Unit tests for PaymentGatewayClient.

The network is replaced by ``httpx.MockTransport``.

Covers:
- Session creation payload and response parsing (both key spellings)
- Status look-up (nested and flat bodies)
- Every failure mode surfaces as PaymentGatewayError
"""

import json

import httpx
import pytest

from modules.payments.exceptions import PaymentGatewayError
from modules.payments.gateway import GatewayConfig, PaymentGatewayClient

pytestmark = pytest.mark.unit

CONFIG = GatewayConfig(
    base_url="https://gateway.test/api/v2",
    api_key="test-api-key",
    merchant_id="merchant-test",
    return_url="http://localhost:3000/payment",
    methods=("bank_card",),
)


def _client(handler):
    return PaymentGatewayClient(CONFIG, transport=httpx.MockTransport(handler))


def _init(client):
    return client.init_payment(
        order_id=3,
        customer_id=7,
        amount=4550,
        customer_email="amira@example.com",
        customer_name="Amira Ben Salah",
    )


class TestInitPayment:
    def test_posts_session_request(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["api_key"] = request.headers["x-api-key"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200, json={"paymentRef": "pay-123", "payUrl": "https://pay.test/123"}
            )

        session = _init(_client(handler))

        assert session.payment_id == "pay-123"
        assert session.payment_url == "https://pay.test/123"
        assert seen["url"] == "https://gateway.test/api/v2/payments/init"
        assert seen["api_key"] == "test-api-key"
        assert seen["body"]["amount"] == 4550
        assert seen["body"]["merchantId"] == "merchant-test"
        assert seen["body"]["metadata"] == {"orderId": 3, "customerId": 7}

    def test_alternative_key_spelling(self):
        def handler(request):
            return httpx.Response(
                201, json={"id": "abc", "paymentUrl": "https://pay.test/abc"}
            )

        session = _init(_client(handler))

        assert session.payment_id == "abc"

    def test_incomplete_session(self):
        def handler(request):
            return httpx.Response(200, json={"paymentRef": "pay-123"})

        with pytest.raises(PaymentGatewayError):
            _init(_client(handler))

    def test_non_2xx(self):
        def handler(request):
            return httpx.Response(502, json={"error": "bad gateway"})

        with pytest.raises(PaymentGatewayError) as exc_info:
            _init(_client(handler))
        assert str(exc_info.value) == "Payment gateway rejected the request"

    def test_timeout(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(PaymentGatewayError) as exc_info:
            _init(_client(handler))
        assert str(exc_info.value) == "Payment gateway timed out"

    def test_unreachable(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(PaymentGatewayError) as exc_info:
            _init(_client(handler))
        assert str(exc_info.value) == "Payment gateway unreachable"

    def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>oops</html>")

        with pytest.raises(PaymentGatewayError):
            _init(_client(handler))

    def test_non_object_body(self):
        def handler(request):
            return httpx.Response(200, json=["pay-123"])

        with pytest.raises(PaymentGatewayError):
            _init(_client(handler))


class TestGetPaymentStatus:
    def test_nested_status_lower_cased(self):
        def handler(request):
            assert request.url.path == "/api/v2/payments/pay-123"
            return httpx.Response(200, json={"payment": {"status": "COMPLETED"}})

        assert _client(handler).get_payment_status("pay-123") == "completed"

    def test_flat_status(self):
        def handler(request):
            return httpx.Response(200, json={"status": "pending"})

        assert _client(handler).get_payment_status("pay-123") == "pending"

    def test_missing_status(self):
        def handler(request):
            return httpx.Response(200, json={"payment": {}})

        with pytest.raises(PaymentGatewayError):
            _client(handler).get_payment_status("pay-123")


class TestGatewayConfig:
    def test_from_settings(self, settings):
        settings.PAYMENT_GATEWAY = {
            "BASE_URL": "https://gateway.example/api/",
            "API_KEY": "k",
            "MERCHANT_ID": "m",
            "RETURN_URL": "http://localhost/payment",
            "CURRENCY": "TND",
            "MINOR_UNITS": 100,
            "TIMEOUT_SECONDS": 5.0,
            "METHODS": ["bank_card", "wallet"],
        }

        config = GatewayConfig.from_settings()

        assert config.base_url == "https://gateway.example/api"
        assert config.timeout_seconds == 5.0
        assert config.methods == ("bank_card", "wallet")
