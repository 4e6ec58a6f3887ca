from pydantic import BaseModel, Field


class AddToCartRequest(BaseModel):
    product_id: str
    variant_id: str | None = None
    quantity: int = Field(default=1, ge=1, le=99)

    model_config = {"json_schema_extra": {"examples": [{"product_id": "prod-001", "quantity": 2}]}}


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(ge=0, le=99)


class CartLineResponse(BaseModel):
    item_id: str
    product_id: str
    variant_id: str | None = None
    product_name: str
    product_name_sv: str | None = None
    slug: str
    variant_name: str | None = None
    sku: str | None = None
    unit_price: float
    quantity: int
    total: float
    image_url: str | None = None


class CartResponse(BaseModel):
    items: list[CartLineResponse]
    item_count: int
    subtotal: float


class CartCountResponse(BaseModel):
    count: int


class IdResponse(BaseModel):
    id: str


class StatusResponse(BaseModel):
    status: str = "ok"
