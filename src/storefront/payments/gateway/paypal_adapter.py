"""PayPal payment gateway adapter.

Talks to the PayPal REST v2 Orders API with ``requests``. Every call first
obtains an OAuth access token with the client-credentials grant. Amounts are
sent as strings with two decimals.
"""

import requests
import structlog

from storefront.payments.gateway.port import PaymentDetails, PaymentGateway, PaymentResult

logger = structlog.get_logger(__name__)

_BASE_URLS = {
    "sandbox": "https://api-m.sandbox.paypal.com",
    "live": "https://api-m.paypal.com",
}
_TIMEOUT = 15


def _value(amount: float) -> str:
    return f"{amount:.2f}"


class PayPalGateway(PaymentGateway):
    provider = "paypal"

    def __init__(self, client_id: str, client_secret: str, mode: str = "sandbox") -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = _BASE_URLS.get(mode, _BASE_URLS["sandbox"])

    def _access_token(self) -> str:
        response = requests.post(
            f"{self.base_url}/v1/oauth2/token",
            auth=(self.client_id, self.client_secret),
            data={"grant_type": "client_credentials"},
            timeout=_TIMEOUT,
        )
        response.raise_for_status()
        return response.json()["access_token"]

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._access_token()}",
            "Content-Type": "application/json",
        }

    def create_payment(self, amount, currency, reference, metadata, breakdown=None) -> PaymentResult:
        currency = currency.upper()
        purchase_unit = {
            "reference_id": reference,
            "amount": {"currency_code": currency, "value": _value(amount)},
        }
        if breakdown:
            purchase_unit["amount"]["breakdown"] = {
                key: {"currency_code": currency, "value": _value(value)} for key, value in breakdown.items()
            }

        try:
            response = requests.post(
                f"{self.base_url}/v2/checkout/orders",
                headers=self._headers(),
                json={"intent": "CAPTURE", "purchase_units": [purchase_unit]},
                timeout=_TIMEOUT,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as exc:
            logger.warning("PayPal order creation failed", error=str(exc))
            return PaymentResult(success=False, status="failed", failure_reason="Failed to create PayPal order")

        order = response.json()
        approval_url = next((link["href"] for link in order.get("links", []) if link.get("rel") == "approve"), None)
        logger.info("PayPal order created", payment_id=order["id"], amount=amount)
        return PaymentResult(
            success=True,
            payment_id=order["id"],
            approval_url=approval_url,
            status=order.get("status"),
            raw=order,
        )

    def retrieve_payment(self, payment_id: str) -> PaymentDetails:
        try:
            response = requests.get(
                f"{self.base_url}/v2/checkout/orders/{payment_id}",
                headers=self._headers(),
                timeout=_TIMEOUT,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as exc:
            logger.warning("PayPal order lookup failed", payment_id=payment_id, error=str(exc))
            return PaymentDetails(status="unknown")

        order = response.json()
        units = order.get("purchase_units") or [{}]
        amount = units[0].get("amount") or {}
        return PaymentDetails(
            status=order.get("status", "unknown"),
            amount=float(amount["value"]) if amount.get("value") else None,
            currency=amount.get("currency_code"),
        )

    def capture_payment(self, payment_id: str) -> PaymentResult:
        try:
            response = requests.post(
                f"{self.base_url}/v2/checkout/orders/{payment_id}/capture",
                headers=self._headers(),
                timeout=_TIMEOUT,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as exc:
            logger.warning("PayPal capture failed", payment_id=payment_id, error=str(exc))
            return PaymentResult(success=False, payment_id=payment_id, failure_reason="Failed to capture PayPal order")

        capture = response.json()
        status = capture.get("status")
        return PaymentResult(success=status == "COMPLETED", payment_id=payment_id, status=status, raw=capture)

    def verify_webhook(self, payload: bytes, signature: str | None) -> dict | None:
        # Orders are captured synchronously; PayPal webhooks are not consumed.
        return None
