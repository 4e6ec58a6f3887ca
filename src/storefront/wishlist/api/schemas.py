from datetime import datetime

from pydantic import BaseModel

from storefront.catalogue.api.schemas import ProductSummaryResponse


class AddToWishlistRequest(BaseModel):
    product_id: str


class WishlistEntryResponse(BaseModel):
    id: str
    added_at: datetime
    product: ProductSummaryResponse


class IdResponse(BaseModel):
    id: str


class StatusResponse(BaseModel):
    status: str = "ok"
