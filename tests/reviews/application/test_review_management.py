"""Application tests for review submission, moderation and helpful votes."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.reviews.management import DeleteReview, MarkReviewHelpful, ModerateReview, SubmitReview
from storefront.reviews.review import Review
from storefront.reviews.stats import product_rating_stats


def _submit(product_id, **overrides):
    defaults = {
        "product_id": product_id,
        "name": "Anna",
        "email": "Anna@Example.com",
        "rating": 4,
        "review_text": "Sturdy and pretty.",
    }
    defaults.update(overrides)
    return current_domain.process(SubmitReview(**defaults), asynchronous=False)


class TestSubmitReview:
    def test_email_normalized(self, make_product):
        review_id = _submit(make_product())
        assert current_domain.repository_for(Review).get(review_id).email == "anna@example.com"

    def test_unknown_product(self):
        with pytest.raises(ValidationError) as exc:
            _submit("missing")
        assert "Product not found" in str(exc.value)

    def test_one_review_per_user_and_product(self, make_product):
        product_id = make_product()
        _submit(product_id, user_id="user-1")
        with pytest.raises(ValidationError) as exc:
            _submit(product_id, user_id="user-1")
        assert "You have already reviewed this product" in str(exc.value)

    def test_guests_may_review_repeatedly(self, make_product):
        product_id = make_product()
        _submit(product_id)
        _submit(product_id)


class TestModeration:
    def test_only_approved_reviews_count(self, make_product):
        product_id = make_product()
        approved = _submit(product_id, rating=5)
        _submit(product_id, rating=1)
        current_domain.process(ModerateReview(review_id=approved, status="approved"), asynchronous=False)

        stats = product_rating_stats(product_id)
        assert stats["total"] == 1
        assert stats["average"] == 5.0

    def test_delete(self, make_product):
        review_id = _submit(make_product())
        current_domain.process(DeleteReview(review_id=review_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Review).get(review_id)


class TestHelpful:
    def test_counts_votes(self, make_product):
        product_id = make_product()
        review_id = _submit(product_id)
        current_domain.process(ModerateReview(review_id=review_id, status="approved"), asynchronous=False)

        current_domain.process(MarkReviewHelpful(review_id=review_id, product_id=product_id), asynchronous=False)
        count = current_domain.process(
            MarkReviewHelpful(review_id=review_id, product_id=product_id), asynchronous=False
        )
        assert count == 2

    def test_pending_review_cannot_be_voted(self, make_product):
        product_id = make_product()
        review_id = _submit(product_id)
        with pytest.raises(ValidationError) as exc:
            current_domain.process(MarkReviewHelpful(review_id=review_id, product_id=product_id), asynchronous=False)
        assert "Review not found for this product" in str(exc.value)
