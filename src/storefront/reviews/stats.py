"""Rating statistics over approved reviews."""

from protean.utils.globals import current_domain

from storefront.reviews.review import Review


def rating_stats(reviews: list[Review]) -> dict:
    distribution = {star: 0 for star in (5, 4, 3, 2, 1)}
    for review in reviews:
        distribution[review.rating] += 1

    total = len(reviews)
    average = round(sum(r.rating for r in reviews) / total, 1) if total else 0
    return {"total": total, "average": average, "distribution": distribution}


def product_rating_stats(product_id: str) -> dict:
    return rating_stats(current_domain.repository_for(Review).approved_for_product(product_id))
