"""Payment gateway port (abstract interface).

Checkout talks to card processors and wallets only through this contract, so
the Stripe and PayPal adapters and the fake used in development are
interchangeable.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PaymentResult:
    """Outcome of creating or capturing a payment."""

    success: bool
    payment_id: str | None = None
    client_secret: str | None = None
    approval_url: str | None = None
    status: str | None = None
    failure_reason: str | None = None
    raw: dict = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class PaymentDetails:
    """What the provider reports for an existing payment.

    ``amount`` is in major units. A payment the provider cannot find or
    report on comes back with status ``unknown``.
    """

    status: str
    amount: float | None = None
    currency: str | None = None


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    provider: str

    @abstractmethod
    def create_payment(
        self,
        amount: float,
        currency: str,
        reference: str,
        metadata: dict,
        breakdown: dict | None = None,
    ) -> PaymentResult:
        """Start a payment for ``amount`` (major units) and return the provider's handle."""
        ...

    @abstractmethod
    def retrieve_payment(self, payment_id: str) -> PaymentDetails:
        """Current status, amount and currency of a payment, e.g. status ``succeeded`` or ``COMPLETED``."""
        ...

    @abstractmethod
    def capture_payment(self, payment_id: str) -> PaymentResult:
        """Capture an approved payment."""
        ...

    @abstractmethod
    def verify_webhook(self, payload: bytes, signature: str | None) -> dict | None:
        """Parsed event when the payload is authentically from the provider, else ``None``."""
        ...
