"""Review submission and moderation: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.identity.shared.email import validate_email
from storefront.reviews.review import Review, ReviewStatus

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Review")
class SubmitReview:
    product_id: Identifier(required=True)
    user_id: Identifier()
    name: String(required=True, min_length=1, max_length=100)
    email: String(required=True, max_length=254)
    rating: Integer(required=True, min_value=1, max_value=5)
    title: String(max_length=200)
    review_text: Text(required=True)


@storefront.command(part_of="Review")
class ModerateReview:
    review_id: Identifier(required=True)
    status: String(required=True, choices=ReviewStatus)


@storefront.command(part_of="Review")
class DeleteReview:
    review_id: Identifier(required=True)


@storefront.command(part_of="Review")
class MarkReviewHelpful:
    review_id: Identifier(required=True)
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Review)
class ManageReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        try:
            current_domain.repository_for(Product).get(command.product_id)
        except ObjectNotFoundError:
            raise ValidationError({"product_id": ["Product not found"]})

        repo = current_domain.repository_for(Review)
        if command.user_id and repo.find_by_user_and_product(command.user_id, command.product_id):
            raise ValidationError({"product_id": ["You have already reviewed this product"]})

        review = Review.submit(
            product_id=command.product_id,
            user_id=command.user_id,
            name=command.name,
            email=validate_email(command.email),
            rating=command.rating,
            title=command.title,
            review_text=command.review_text,
        )
        repo.add(review)
        logger.info("Review submitted", review_id=str(review.id), product_id=str(command.product_id))
        return str(review.id)

    @handle(ModerateReview)
    def moderate_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)
        review.moderate(command.status)
        repo.add(review)

    @handle(DeleteReview)
    def delete_review(self, command):
        repo = current_domain.repository_for(Review)
        repo._dao.delete(repo.get(command.review_id))

    @handle(MarkReviewHelpful)
    def mark_helpful(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)
        if str(review.product_id) != str(command.product_id) or not review.is_approved:
            raise ValidationError({"review_id": ["Review not found for this product"]})
        review.mark_helpful()
        repo.add(review)
        return review.helpful_count
