"""Pydantic request/response schemas for the Catalogue API.

These are external contracts, separate from internal Protean commands.
Responses read straight off aggregates (``from_attributes``).
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ProductStatusLiteral = Literal["draft", "active", "archived"]


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------
class CreateCategoryRequest(BaseModel):
    name_en: str = Field(min_length=1, max_length=200)
    name_sv: str = Field(min_length=1, max_length=200)
    slug: str | None = Field(default=None, max_length=200)
    description_en: str | None = None
    description_sv: str | None = None
    image_url: str | None = Field(default=None, max_length=500)
    parent_id: str | None = None
    sort_order: int = Field(default=0, ge=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name_en": "Bowls",
                    "name_sv": "Skålar",
                    "description_en": "Hand-thrown stoneware bowls",
                }
            ]
        }
    }


class UpdateCategoryRequest(BaseModel):
    name_en: str | None = Field(default=None, min_length=1, max_length=200)
    name_sv: str | None = Field(default=None, min_length=1, max_length=200)
    slug: str | None = Field(default=None, max_length=200)
    description_en: str | None = None
    description_sv: str | None = None
    image_url: str | None = Field(default=None, max_length=500)
    parent_id: str | None = None
    sort_order: int | None = Field(default=None, ge=0)


class ReorderCategoriesRequest(BaseModel):
    category_ids: list[str] = Field(min_length=1)


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name_en: str
    name_sv: str
    slug: str
    description_en: str | None = None
    description_sv: str | None = None
    image_url: str | None = None
    parent_id: str | None = None
    sort_order: int = 0


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------
class VariantFields(BaseModel):
    name_en: str | None = Field(default=None, max_length=200)
    name_sv: str | None = Field(default=None, max_length=200)
    sku: str | None = Field(default=None, max_length=100)
    price: float | None = Field(default=None, ge=0)
    compare_at_price: float | None = Field(default=None, ge=0)
    stock_quantity: int | None = Field(default=None, ge=0)
    track_inventory: bool | None = None
    option1_name: str | None = None
    option1_value: str | None = None
    option2_name: str | None = None
    option2_value: str | None = None
    option3_name: str | None = None
    option3_value: str | None = None


class CreateProductRequest(BaseModel):
    name_en: str = Field(min_length=1, max_length=255)
    name_sv: str = Field(min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description_en: str | None = None
    description_sv: str | None = None
    instructions_en: str | None = None
    instructions_sv: str | None = None
    category_id: str | None = None
    price: float = Field(ge=0)
    compare_at_price: float | None = Field(default=None, ge=0)
    sku: str | None = Field(default=None, max_length=100)
    status: ProductStatusLiteral = "draft"
    featured: bool = False
    stock_quantity: int = Field(default=0, ge=0)
    track_inventory: bool = True

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name_en": "Blue Glazed Bowl",
                    "name_sv": "Blå Glaserad Skål",
                    "price": 349.0,
                    "sku": "BOWL-BLUE",
                    "status": "active",
                    "stock_quantity": 12,
                }
            ]
        }
    }


class UpdateProductRequest(BaseModel):
    name_en: str | None = Field(default=None, min_length=1, max_length=255)
    name_sv: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description_en: str | None = None
    description_sv: str | None = None
    instructions_en: str | None = None
    instructions_sv: str | None = None
    category_id: str | None = None
    price: float | None = Field(default=None, ge=0)
    compare_at_price: float | None = Field(default=None, ge=0)
    sku: str | None = Field(default=None, max_length=100)
    featured: bool | None = None
    stock_quantity: int | None = Field(default=None, ge=0)
    track_inventory: bool | None = None


class ChangeProductStatusRequest(BaseModel):
    status: ProductStatusLiteral


class AddImageRequest(BaseModel):
    url: str = Field(min_length=1, max_length=500)
    variant_id: str | None = None
    alt_text_en: str | None = Field(default=None, max_length=255)
    alt_text_sv: str | None = Field(default=None, max_length=255)


class ReorderImagesRequest(BaseModel):
    image_ids: list[str] = Field(min_length=1)


class VariantResponse(VariantFields):
    model_config = ConfigDict(from_attributes=True)

    id: str
    display_name: str | None = None


class ImageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    url: str
    variant_id: str | None = None
    alt_text_en: str | None = None
    alt_text_sv: str | None = None
    sort_order: int = 0


class ProductSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name_en: str
    name_sv: str
    slug: str
    price: float
    compare_at_price: float | None = None
    status: str
    featured: bool = False
    category_id: str | None = None
    stock_quantity: int = 0
    primary_image: ImageResponse | None = None


class ProductResponse(ProductSummaryResponse):
    description_en: str | None = None
    description_sv: str | None = None
    instructions_en: str | None = None
    instructions_sv: str | None = None
    sku: str | None = None
    track_inventory: bool = True
    variants: list[VariantResponse] = []
    images: list[ImageResponse] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductListResponse(BaseModel):
    products: list[ProductSummaryResponse]
    total: int


class CategoryDetailResponse(CategoryResponse):
    products: list[ProductSummaryResponse] = []


class AutocompleteResponse(BaseModel):
    suggestions: list[dict]


class CountResponse(BaseModel):
    count: int


class IdResponse(BaseModel):
    id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class BulkProductRequest(BaseModel):
    product_ids: list[str] = Field(min_length=1)
    action: Literal["delete", "status", "category", "featured"]
    value: str | bool | None = None


class BulkProductResponse(BaseModel):
    updated: int
    message: str
