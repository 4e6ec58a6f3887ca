"""Product reviews: public listing and submission, admin moderation."""

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.identity.session import optional_user, require_admin
from storefront.identity.user.user import User
from storefront.reviews.api.schemas import (
    AdminReviewResponse,
    HelpfulResponse,
    IdResponse,
    ModerateReviewRequest,
    ProductReviewsResponse,
    RatingStatsResponse,
    ReviewResponse,
    StatusResponse,
    SubmitReviewRequest,
)
from storefront.reviews.management import DeleteReview, MarkReviewHelpful, ModerateReview, SubmitReview
from storefront.reviews.review import Review
from storefront.reviews.stats import rating_stats

review_router = APIRouter(prefix="/products/{slug}/reviews", tags=["reviews"])
admin_review_router = APIRouter(prefix="/admin/reviews", tags=["admin"], dependencies=[Depends(require_admin)])


def _product_for(slug: str) -> Product:
    product = current_domain.repository_for(Product).find_active_by_slug(slug)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@review_router.get("", response_model=ProductReviewsResponse)
async def product_reviews(slug: str) -> ProductReviewsResponse:
    product = _product_for(slug)
    reviews = current_domain.repository_for(Review).approved_for_product(str(product.id))
    return ProductReviewsResponse(
        reviews=[ReviewResponse.model_validate(r) for r in reviews],
        stats=RatingStatsResponse(**rating_stats(reviews)),
    )


@review_router.post("", status_code=201, response_model=IdResponse)
async def submit_review(
    slug: str, body: SubmitReviewRequest, user: User | None = Depends(optional_user)
) -> IdResponse:
    product = _product_for(slug)
    name = body.name or (user.name if user else None)
    email = body.email or (user.email if user else None)
    if not name or not email:
        raise HTTPException(status_code=400, detail="Name and email are required")

    command = SubmitReview(
        product_id=str(product.id),
        user_id=str(user.id) if user else None,
        name=name,
        email=email,
        rating=body.rating,
        title=body.title,
        review_text=body.review_text,
    )
    return IdResponse(id=current_domain.process(command, asynchronous=False))


@review_router.post("/{review_id}/helpful", response_model=HelpfulResponse)
async def mark_helpful(slug: str, review_id: str) -> HelpfulResponse:
    product = _product_for(slug)
    command = MarkReviewHelpful(review_id=review_id, product_id=str(product.id))
    return HelpfulResponse(helpful_count=current_domain.process(command, asynchronous=False))


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------
@admin_review_router.get("", response_model=list[AdminReviewResponse])
async def list_reviews(status: str | None = None) -> list[AdminReviewResponse]:
    reviews = current_domain.repository_for(Review).list_reviews(status=status)
    return [AdminReviewResponse.model_validate(r) for r in reviews]


@admin_review_router.put("/{review_id}", response_model=StatusResponse)
async def moderate_review(review_id: str, body: ModerateReviewRequest) -> StatusResponse:
    current_domain.process(ModerateReview(review_id=review_id, status=body.status), asynchronous=False)
    return StatusResponse()


@admin_review_router.delete("/{review_id}", response_model=StatusResponse)
async def delete_review(review_id: str) -> StatusResponse:
    current_domain.process(DeleteReview(review_id=review_id), asynchronous=False)
    return StatusResponse()
