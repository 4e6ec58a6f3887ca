from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class CreateDiscountCodeRequest(BaseModel):
    code: str = Field(min_length=1, max_length=50)
    description: str | None = None
    discount_type: Literal["percentage", "fixed"]
    discount_value: float = Field(ge=0)
    minimum_purchase: float | None = Field(default=None, ge=0)
    maximum_discount: float | None = Field(default=None, ge=0)
    usage_limit: int | None = Field(default=None, ge=1)
    user_usage_limit: int | None = Field(default=None, ge=1)
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    active: bool = True

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "code": "SUMMER20",
                    "discount_type": "percentage",
                    "discount_value": 20,
                    "minimum_purchase": 500,
                    "maximum_discount": 300,
                }
            ]
        }
    }


class UpdateDiscountCodeRequest(BaseModel):
    code: str | None = Field(default=None, min_length=1, max_length=50)
    description: str | None = None
    discount_type: Literal["percentage", "fixed"] | None = None
    discount_value: float | None = Field(default=None, ge=0)
    minimum_purchase: float | None = Field(default=None, ge=0)
    maximum_discount: float | None = Field(default=None, ge=0)
    usage_limit: int | None = Field(default=None, ge=1)
    user_usage_limit: int | None = Field(default=None, ge=1)
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    active: bool | None = None
    clear_fields: list[str] | None = None


class DiscountCodeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    description: str | None = None
    discount_type: str
    discount_value: float
    minimum_purchase: float | None = None
    maximum_discount: float | None = None
    usage_limit: int | None = None
    usage_count: int = 0
    user_usage_limit: int = 1
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    active: bool = True
    created_at: datetime | None = None


class IdResponse(BaseModel):
    id: str


class StatusResponse(BaseModel):
    status: str = "ok"
