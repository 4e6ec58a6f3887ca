"""Shipping cost rules."""

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.shared.money import round_money
from storefront.shipping.region import ShippingRegion


def calculate_shipping_cost(region: ShippingRegion | None, subtotal: float) -> float:
    """Flat ``base_price``, waived once the subtotal reaches the free-shipping threshold."""
    if region is None:
        return 0.0
    if region.free_shipping_threshold is not None and subtotal >= region.free_shipping_threshold:
        return 0.0
    return round_money(region.base_price)


def amount_until_free_shipping(region: ShippingRegion, subtotal: float) -> float | None:
    if region.free_shipping_threshold is None:
        return None
    return round_money(max(region.free_shipping_threshold - subtotal, 0.0))


def detect_region(country_code: str | None) -> ShippingRegion | None:
    code = (country_code or "").strip().upper()
    if len(code) != 2 or not code.isalpha():
        raise ValidationError({"country": ["Country code must be a 2-letter ISO code"]})
    return current_domain.repository_for(ShippingRegion).find_for_country(code)


def resolve_region(region_id: str | None = None, country_code: str | None = None) -> ShippingRegion | None:
    """Region by explicit id, falling back to country detection."""
    if region_id:
        region = current_domain.repository_for(ShippingRegion).get(region_id)
        if not region.active:
            raise ValidationError({"shipping_region_id": ["Shipping region is not available"]})
        return region
    if country_code:
        return detect_region(country_code)
    return None
