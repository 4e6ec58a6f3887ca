"""Review aggregate: a shopper's rating and text for a product.

Reviews start ``pending`` and appear on the storefront only once an admin
approves them.
"""

from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.shared.clock import now


class ReviewStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@storefront.aggregate
class Review:
    product_id: Identifier(required=True)
    user_id: Identifier()
    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    rating: Integer(required=True, min_value=1, max_value=5)
    title: String(max_length=200)
    review_text: Text(required=True)
    status: String(choices=ReviewStatus, default=ReviewStatus.PENDING.value)
    helpful_count: Integer(default=0, min_value=0)
    created_at: DateTime(default=now)
    updated_at: DateTime(default=now)

    @classmethod
    def submit(cls, product_id, name, email, rating, review_text, title=None, user_id=None):
        from storefront.reviews.events import ReviewSubmitted

        if not review_text or not review_text.strip():
            raise ValidationError({"review_text": ["Review text is required"]})

        timestamp = now()
        review = cls(
            product_id=product_id,
            user_id=user_id,
            name=name.strip(),
            email=email,
            rating=rating,
            title=title,
            review_text=review_text.strip(),
            status=ReviewStatus.PENDING.value,
            created_at=timestamp,
            updated_at=timestamp,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=review.id,
                product_id=product_id,
                rating=rating,
                submitted_at=timestamp,
            )
        )
        return review

    @property
    def is_approved(self):
        return self.status == ReviewStatus.APPROVED.value

    def moderate(self, status):
        new_status = ReviewStatus(status)
        if new_status == ReviewStatus.PENDING:
            raise ValidationError({"status": ["Reviews can only be approved or rejected"]})
        self.status = new_status.value
        self.updated_at = now()

    def mark_helpful(self):
        self.helpful_count = (self.helpful_count or 0) + 1
