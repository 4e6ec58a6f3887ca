"""Configurable fake payment gateway for development and testing.

Used whenever a provider's credentials are not configured. It never leaves
the process and can be told to succeed or fail, and which status to report.
"""

import json
from uuid import uuid4

from storefront.payments.gateway.port import PaymentDetails, PaymentGateway, PaymentResult

_SUCCESS_STATUS = {"stripe": "succeeded", "paypal": "COMPLETED"}


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self, provider: str = "stripe") -> None:
        self.provider = provider
        self.should_succeed: bool = True
        self.failure_reason: str = "Card declined"
        self.status: str = _SUCCESS_STATUS.get(provider, "succeeded")
        self.calls: list[dict] = []
        self.payments: dict[str, dict] = {}

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Card declined",
        status: str | None = None,
    ) -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        if status is not None:
            self.status = status

    def create_payment(self, amount, currency, reference, metadata, breakdown=None) -> PaymentResult:
        self.calls.append(
            {
                "method": "create_payment",
                "amount": amount,
                "currency": currency,
                "reference": reference,
                "metadata": dict(metadata),
                "breakdown": breakdown,
            }
        )

        if not self.should_succeed:
            return PaymentResult(success=False, status="failed", failure_reason=self.failure_reason)

        payment_id = f"fake_{self.provider}_{uuid4().hex[:12]}"
        self.payments[payment_id] = {"amount": amount, "currency": currency.upper()}
        if self.provider == "paypal":
            return PaymentResult(
                success=True,
                payment_id=payment_id,
                approval_url=f"https://paypal.test/checkoutnow?token={payment_id}",
                status="CREATED",
            )
        return PaymentResult(
            success=True,
            payment_id=payment_id,
            client_secret=f"{payment_id}_secret",
            status="requires_payment_method",
        )

    def retrieve_payment(self, payment_id: str) -> PaymentDetails:
        self.calls.append({"method": "retrieve_payment", "payment_id": payment_id})

        payment = self.payments.get(payment_id)
        if payment is None:
            return PaymentDetails(status="unknown")
        return PaymentDetails(status=self.status, amount=payment["amount"], currency=payment["currency"])

    def capture_payment(self, payment_id: str) -> PaymentResult:
        self.calls.append({"method": "capture_payment", "payment_id": payment_id})

        if not self.should_succeed:
            return PaymentResult(success=False, payment_id=payment_id, failure_reason=self.failure_reason)
        return PaymentResult(success=True, payment_id=payment_id, status=self.status)

    def verify_webhook(self, payload: bytes, signature: str | None) -> dict | None:
        if signature != "test-signature":
            return None
        return json.loads(payload)
