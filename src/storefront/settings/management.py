"""Store settings: commands and handler."""

from protean import handle
from protean.fields import Float, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.settings.store_settings import StoreSettings, find_store_settings


@storefront.command(part_of="StoreSettings")
class EnsureStoreSettings:
    """Create the settings record with defaults when the shop has none yet."""


@storefront.command(part_of="StoreSettings")
class UpdateStoreSettings:
    store_name: String(max_length=200)
    store_email: String(max_length=254)
    store_phone: String(max_length=50)
    store_address: Text()
    currency: String(max_length=3)
    tax_rate: Float(min_value=0.0, max_value=100.0)
    low_stock_threshold: Integer(min_value=0)


@storefront.command_handler(part_of=StoreSettings)
class StoreSettingsHandler:
    @handle(EnsureStoreSettings)
    def ensure_settings(self, command):
        settings = find_store_settings()
        if settings is None:
            settings = StoreSettings()
            current_domain.repository_for(StoreSettings).add(settings)
        return str(settings.id)

    @handle(UpdateStoreSettings)
    def update_settings(self, command):
        repo = current_domain.repository_for(StoreSettings)
        settings = find_store_settings() or StoreSettings()
        settings.update(
            store_name=command.store_name,
            store_email=command.store_email,
            store_phone=command.store_phone,
            store_address=command.store_address,
            currency=command.currency,
            tax_rate=command.tax_rate,
            low_stock_threshold=command.low_stock_threshold,
        )
        repo.add(settings)
