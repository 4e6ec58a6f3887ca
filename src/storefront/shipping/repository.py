"""Repository for the ShippingRegion aggregate."""

from storefront.domain import storefront
from storefront.shipping.region import ShippingRegion


@storefront.repository(part_of=ShippingRegion)
class ShippingRegionRepository:
    def find_by_code(self, code: str) -> ShippingRegion | None:
        return self._dao.query.filter(code=code.strip().upper()).all().first

    def list_regions(self, active_only: bool = True) -> list[ShippingRegion]:
        queryset = self._dao.query.filter(active=True) if active_only else self._dao.query
        return sorted(queryset.limit(None).all().items, key=lambda r: r.name_en.lower())

    def find_for_country(self, country_code: str) -> ShippingRegion | None:
        """First active region (by name) whose country list includes ``country_code``."""
        return next((r for r in self.list_regions() if r.covers(country_code)), None)
