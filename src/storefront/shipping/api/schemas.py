from pydantic import BaseModel, Field, model_validator

from storefront.shipping.region import ShippingRegion


class CreateShippingRegionRequest(BaseModel):
    name_en: str = Field(min_length=1, max_length=100)
    name_sv: str = Field(min_length=1, max_length=100)
    code: str = Field(min_length=1, max_length=20)
    base_price: float = Field(ge=0)
    free_shipping_threshold: float | None = Field(default=None, ge=0)
    countries: list[str] = Field(min_length=1)
    active: bool = True

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name_en": "Nordics",
                    "name_sv": "Norden",
                    "code": "NORDIC",
                    "base_price": 79,
                    "free_shipping_threshold": 800,
                    "countries": ["SE", "NO", "DK", "FI"],
                }
            ]
        }
    }


class UpdateShippingRegionRequest(BaseModel):
    name_en: str | None = Field(default=None, min_length=1, max_length=100)
    name_sv: str | None = Field(default=None, min_length=1, max_length=100)
    code: str | None = Field(default=None, min_length=1, max_length=20)
    base_price: float | None = Field(default=None, ge=0)
    free_shipping_threshold: float | None = Field(default=None, ge=0)
    clear_free_shipping_threshold: bool = False
    countries: list[str] | None = None
    active: bool | None = None


class CalculateShippingRequest(BaseModel):
    region_id: str | None = None
    country: str | None = Field(default=None, min_length=2, max_length=2)
    subtotal: float = Field(ge=0)

    @model_validator(mode="after")
    def region_or_country(self):
        if not self.region_id and not self.country:
            raise ValueError("Either region_id or country is required")
        return self


class ShippingRegionResponse(BaseModel):
    id: str
    name_en: str
    name_sv: str
    code: str
    base_price: float
    free_shipping_threshold: float | None = None
    countries: list[str]
    active: bool

    @classmethod
    def from_region(cls, region: ShippingRegion) -> "ShippingRegionResponse":
        return cls(
            id=region.id,
            name_en=region.name_en,
            name_sv=region.name_sv,
            code=region.code,
            base_price=region.base_price,
            free_shipping_threshold=region.free_shipping_threshold,
            countries=region.country_codes,
            active=region.active,
        )


class ShippingQuoteResponse(BaseModel):
    region: ShippingRegionResponse
    shipping_cost: float
    free_shipping: bool
    amount_until_free_shipping: float | None = None


class IdResponse(BaseModel):
    id: str


class StatusResponse(BaseModel):
    status: str = "ok"
