"""Payment gateway registry.

``get_gateway(provider)`` returns the real adapter when the provider's
credentials are configured. Outside production a FakeGateway stands in;
in production a missing provider is a configuration error. Tests swap
implementations with ``set_gateway`` and restore with ``reset_gateways``.
"""

from protean.exceptions import ConfigurationError

from storefront.payments.gateway.fake_adapter import FakeGateway
from storefront.payments.gateway.port import PaymentDetails, PaymentGateway, PaymentResult
from storefront.utils.config import get_paypal_credentials, get_stripe_credentials, is_production

__all__ = ["PaymentDetails", "PaymentGateway", "PaymentResult", "get_gateway", "reset_gateways", "set_gateway"]

PROVIDERS = ("stripe", "paypal")

_PROVIDER_NAMES = {"stripe": "Stripe", "paypal": "PayPal"}

_gateways: dict[str, PaymentGateway] = {}


def _build_gateway(provider: str) -> PaymentGateway:
    if provider == "stripe":
        credentials = get_stripe_credentials()
        if credentials:
            from storefront.payments.gateway.stripe_adapter import StripeGateway

            return StripeGateway(*credentials)
    elif provider == "paypal":
        credentials = get_paypal_credentials()
        if credentials:
            from storefront.payments.gateway.paypal_adapter import PayPalGateway

            return PayPalGateway(*credentials)
    else:
        raise ValueError(f"Unknown payment provider: {provider}")

    if is_production():
        raise ConfigurationError(f"{_PROVIDER_NAMES[provider]} is not configured")
    return FakeGateway(provider)


def get_gateway(provider: str) -> PaymentGateway:
    """Return the active gateway for ``provider``."""
    if provider not in _gateways:
        _gateways[provider] = _build_gateway(provider)
    return _gateways[provider]


def set_gateway(provider: str, gateway: PaymentGateway) -> None:
    """Override the gateway for a provider (useful for tests)."""
    _gateways[provider] = gateway


def reset_gateways() -> None:
    _gateways.clear()
