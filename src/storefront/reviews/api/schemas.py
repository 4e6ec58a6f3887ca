from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class SubmitReviewRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, max_length=254)
    rating: int = Field(ge=1, le=5)
    title: str | None = Field(default=None, max_length=200)
    review_text: str = Field(min_length=1, max_length=5000)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Anna",
                    "email": "anna@example.com",
                    "rating": 5,
                    "title": "Lovely glaze",
                    "review_text": "The bowl is even nicer in person.",
                }
            ]
        }
    }


class ModerateReviewRequest(BaseModel):
    status: Literal["approved", "rejected"]


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    product_id: str
    name: str
    rating: int
    title: str | None = None
    review_text: str
    helpful_count: int = 0
    created_at: datetime


class AdminReviewResponse(ReviewResponse):
    user_id: str | None = None
    email: str
    status: str


class RatingStatsResponse(BaseModel):
    total: int
    average: float
    distribution: dict[int, int]


class ProductReviewsResponse(BaseModel):
    reviews: list[ReviewResponse]
    stats: RatingStatsResponse


class HelpfulResponse(BaseModel):
    helpful_count: int


class IdResponse(BaseModel):
    id: str


class StatusResponse(BaseModel):
    status: str = "ok"
