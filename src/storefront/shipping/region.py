"""ShippingRegion aggregate: flat-rate shipping zones keyed by country."""

import json

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, String, Text

from storefront.domain import storefront
from storefront.shared.clock import now


def normalize_countries(countries) -> list[str]:
    """Uppercase, de-duplicate and validate ISO 3166-1 alpha-2 country codes."""
    normalized = []
    for code in countries or []:
        code = (code or "").strip().upper()
        if len(code) != 2 or not code.isalpha():
            raise ValidationError({"countries": [f"Invalid country code: {code!r}"]})
        if code not in normalized:
            normalized.append(code)
    return normalized


@storefront.aggregate
class ShippingRegion:
    """A shipping zone with a flat base price and an optional free-shipping threshold.

    ``countries`` is stored as a JSON array of ISO-2 codes.
    """

    name_en: String(required=True, max_length=100)
    name_sv: String(required=True, max_length=100)
    code: String(required=True, max_length=20, unique=True)
    base_price: Float(required=True, min_value=0.0)
    free_shipping_threshold: Float(min_value=0.0)
    countries: Text(default="[]")
    active: Boolean(default=True)
    created_at: DateTime(default=now)
    updated_at: DateTime(default=now)

    @invariant.post
    def code_must_be_uppercase(self):
        if self.code and self.code != self.code.upper():
            raise ValidationError({"code": ["Region code must be uppercase"]})

    @classmethod
    def create(cls, name_en, name_sv, code, base_price, countries, free_shipping_threshold=None, active=True):
        timestamp = now()
        return cls(
            name_en=name_en,
            name_sv=name_sv,
            code=code.strip().upper(),
            base_price=base_price,
            free_shipping_threshold=free_shipping_threshold,
            countries=json.dumps(normalize_countries(countries)),
            active=active,
            created_at=timestamp,
            updated_at=timestamp,
        )

    @property
    def country_codes(self) -> list[str]:
        return json.loads(self.countries) if self.countries else []

    def covers(self, country_code) -> bool:
        return (country_code or "").upper() in self.country_codes

    def update(self, countries=None, clear_free_shipping_threshold=False, **changes):
        for field, value in changes.items():
            if value is not None:
                setattr(self, field, value.strip().upper() if field == "code" else value)
        if clear_free_shipping_threshold:
            self.free_shipping_threshold = None
        if countries is not None:
            self.countries = json.dumps(normalize_countries(countries))
        self.updated_at = now()
