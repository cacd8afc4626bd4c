"""HTTP client of the external payment gateway.

Credentials and endpoints come from ``settings.PAYMENT_GATEWAY`` through
``GatewayConfig``; the client holds no module-level secrets.  Every call
is bounded by ``timeout_seconds`` and fails closed: any transport error,
timeout, non-2xx answer or malformed body raises ``PaymentGatewayError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import httpx
import structlog
from django.conf import settings

from modules.payments.exceptions import PaymentGatewayError

logger = structlog.get_logger(__name__)

PAID_STATUSES = frozenset({"completed", "paid", "success"})
FAILED_STATUSES = frozenset({"failed", "expired", "canceled", "cancelled"})


@dataclass(frozen=True)
class GatewayConfig:
    base_url: str
    api_key: str
    merchant_id: str
    return_url: str
    currency: str = "TND"
    minor_units: int = 100
    timeout_seconds: float = 10.0
    methods: Tuple[str, ...] = ()

    @classmethod
    def from_settings(cls) -> GatewayConfig:
        conf = settings.PAYMENT_GATEWAY
        return cls(
            base_url=conf["BASE_URL"].rstrip("/"),
            api_key=conf["API_KEY"],
            merchant_id=conf["MERCHANT_ID"],
            return_url=conf["RETURN_URL"],
            currency=conf["CURRENCY"],
            minor_units=conf["MINOR_UNITS"],
            timeout_seconds=conf["TIMEOUT_SECONDS"],
            methods=tuple(conf["METHODS"]),
        )


@dataclass(frozen=True)
class PaymentSession:
    payment_id: str
    payment_url: str


class PaymentGatewayClient:
    """Thin synchronous client; ``transport`` lets tests stub the network."""

    def __init__(
        self,
        config: GatewayConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self._config.base_url,
            timeout=self._config.timeout_seconds,
            transport=self._transport,
            headers={
                "Accept": "application/json",
                "x-api-key": self._config.api_key,
            },
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        log = logger.bind(method=method, path=path)
        try:
            with self._client() as client:
                response = client.request(method, path, **kwargs)
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPStatusError as exc:
            log.error("payment.gateway_rejected", status_code=exc.response.status_code)
            raise PaymentGatewayError("Payment gateway rejected the request") from exc
        except httpx.TimeoutException as exc:
            log.error("payment.gateway_timeout")
            raise PaymentGatewayError("Payment gateway timed out") from exc
        except httpx.HTTPError as exc:
            log.error("payment.gateway_unreachable", error=str(exc))
            raise PaymentGatewayError("Payment gateway unreachable") from exc
        except ValueError as exc:
            log.error("payment.gateway_bad_body")
            raise PaymentGatewayError("Payment gateway returned an invalid body") from exc

        if not isinstance(body, dict):
            raise PaymentGatewayError("Payment gateway returned an invalid body")
        return body

    def init_payment(
        self,
        *,
        order_id: int,
        customer_id: int,
        amount: int,
        customer_email: str,
        customer_name: str,
    ) -> PaymentSession:
        """Open a payment session for *amount* (in minor units)."""
        payload = {
            "merchantId": self._config.merchant_id,
            "amount": amount,
            "currency": self._config.currency,
            "customer": {"email": customer_email, "name": customer_name},
            "metadata": {"orderId": order_id, "customerId": customer_id},
            "methods": list(self._config.methods),
            "successUrl": f"{self._config.return_url}?success=true",
            "failUrl": f"{self._config.return_url}?success=false",
        }
        body = self._request("POST", "/payments/init", json=payload)

        payment_id = body.get("id") or body.get("paymentRef")
        payment_url = body.get("paymentUrl") or body.get("payUrl")
        if not payment_id or not payment_url:
            logger.error("payment.gateway_incomplete_session", order_id=order_id)
            raise PaymentGatewayError("Payment gateway returned an incomplete session")
        return PaymentSession(payment_id=str(payment_id), payment_url=str(payment_url))

    def get_payment_status(self, payment_id: str) -> str:
        """Gateway status of a payment, lower-cased (``completed``, ``pending``…)."""
        body = self._request("GET", f"/payments/{payment_id}")
        payment = body.get("payment") if isinstance(body.get("payment"), dict) else body
        status = payment.get("status")
        if not status:
            raise PaymentGatewayError("Payment gateway returned no status")
        return str(status).lower()
