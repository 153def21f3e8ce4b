"""Aggregator — per-listing grouping and average rating."""

from __future__ import annotations

from collections.abc import Iterable

from reviews.review.review import CamelModel, CanonicalReview


class ListingAggregate(CamelModel):
    listing_name: str
    reviews: list[CanonicalReview] = []
    average_rating: float | None = None


def _average(reviews: list[CanonicalReview]) -> float | None:
    # A present zero rating is a real score and counts toward the mean.
    ratings = [r.overall_rating for r in reviews if r.overall_rating is not None]
    if not ratings:
        return None
    return sum(ratings) / len(ratings)


def aggregate_by_listing(reviews: Iterable[CanonicalReview]) -> dict[str, ListingAggregate]:
    """Group reviews by listing name, keeping first-seen group and review order."""
    groups: dict[str, list[CanonicalReview]] = {}
    for review in reviews:
        groups.setdefault(review.listing_key, []).append(review)

    return {
        name: ListingAggregate(listing_name=name, reviews=members, average_rating=_average(members))
        for name, members in groups.items()
    }
