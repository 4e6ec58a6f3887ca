from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UpdateStoreSettingsRequest(BaseModel):
    store_name: str | None = Field(default=None, max_length=200)
    store_email: str | None = Field(default=None, max_length=254)
    store_phone: str | None = Field(default=None, max_length=50)
    store_address: str | None = None
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    tax_rate: float | None = Field(default=None, ge=0, le=100)
    low_stock_threshold: int | None = Field(default=None, ge=0)

    model_config = {"json_schema_extra": {"examples": [{"tax_rate": 25, "currency": "SEK"}]}}


class StoreSettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    store_name: str | None = None
    store_email: str | None = None
    store_phone: str | None = None
    store_address: str | None = None
    currency: str
    tax_rate: float
    low_stock_threshold: int
    updated_at: datetime | None = None
