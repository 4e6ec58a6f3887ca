"""StoreSettings aggregate: singleton holding shop-wide configuration."""

from protean.fields import DateTime, Float, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.shared.clock import now

DEFAULT_TAX_RATE = 0.25


@storefront.aggregate
class StoreSettings:
    """Shop identity, currency and tax configuration.

    ``tax_rate`` is a percentage (25 means 25% VAT). Catalogue prices are
    tax-inclusive; the rate is only used to extract the tax share.
    """

    store_name: String(max_length=200, default="Storefront")
    store_email: String(max_length=254)
    store_phone: String(max_length=50)
    store_address: Text()
    currency: String(max_length=3, default="SEK")
    tax_rate: Float(min_value=0.0, max_value=100.0, default=25.0)
    low_stock_threshold: Integer(min_value=0, default=10)
    updated_at: DateTime(default=now)

    def update(self, **changes):
        for field, value in changes.items():
            if value is not None:
                setattr(self, field, value)
        if self.currency:
            self.currency = self.currency.upper()
        self.updated_at = now()

    @property
    def tax_rate_decimal(self):
        return (self.tax_rate or 0.0) / 100


def find_store_settings() -> StoreSettings | None:
    return current_domain.repository_for(StoreSettings)._dao.query.all().first


def effective_tax_rate() -> float:
    """Tax rate as a decimal; 25% VAT when the shop has not been configured yet."""
    settings = find_store_settings()
    if settings is None:
        return DEFAULT_TAX_RATE
    return settings.tax_rate_decimal


def store_currency() -> str:
    settings = find_store_settings()
    return settings.currency if settings is not None else "SEK"
