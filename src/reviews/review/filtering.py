"""Filter Engine — narrows canonical reviews by optional, ANDed criteria."""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from reviews.exceptions import InvalidArgument
from reviews.review.review import CanonicalReview
from reviews.utils.timestamps import parse_timestamp


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class FilterCriteria(BaseModel):
    """Filtering criteria; every field is optional and absent means "any"."""

    model_config = ConfigDict(frozen=True)

    listing: str | None = None
    status: str | None = None
    type: str | None = None
    rating_min: float | None = None
    rating_max: float | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None

    @field_validator("listing", "status", "type", mode="before")
    @classmethod
    def _text(cls, value):
        return _blank_to_none(value)

    @field_validator("rating_min", "rating_max", mode="before")
    @classmethod
    def _rating(cls, value):
        value = _blank_to_none(value)
        if value is None:
            return None
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"must be a number, got {value!r}") from None
        if isinstance(value, bool) or not math.isfinite(number):
            raise ValueError(f"must be a finite number, got {value!r}")
        return number

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def _date(cls, value):
        value = _blank_to_none(value)
        if value is None:
            return None
        if isinstance(value, datetime):
            return value if value.tzinfo else value.replace(tzinfo=UTC)
        try:
            return parse_timestamp(value)
        except ValueError:
            raise ValueError(f"must be an ISO-8601 date or datetime, got {value!r}") from None

    @classmethod
    def from_query(cls, **params) -> FilterCriteria:
        """Build criteria from raw query-string values.

        Raises:
            InvalidArgument: when a numeric or date criterion cannot be parsed.
        """
        try:
            return cls(**params)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg'].removeprefix('Value error, ')}"
                for err in exc.errors()
            )
            raise InvalidArgument(f"Invalid filter criteria: {problems}") from exc


def _submitted(review: CanonicalReview) -> datetime | None:
    if not review.submitted_at:
        return None
    return parse_timestamp(review.submitted_at)


def _matches(review: CanonicalReview, criteria: FilterCriteria) -> bool:
    if criteria.listing is not None:
        if criteria.listing.lower() not in (review.listing_name or "").lower():
            return False
    if criteria.status is not None and (review.status or "").lower() != criteria.status.lower():
        return False
    if criteria.type is not None and (review.type or "").lower() != criteria.type.lower():
        return False

    rating = review.overall_rating
    if criteria.rating_min is not None and (rating is None or rating < criteria.rating_min):
        return False
    if criteria.rating_max is not None and (rating is None or rating > criteria.rating_max):
        return False

    if criteria.date_from is not None or criteria.date_to is not None:
        submitted = _submitted(review)
        if submitted is None:
            return False
        if criteria.date_from is not None and submitted < criteria.date_from:
            return False
        if criteria.date_to is not None and submitted > criteria.date_to:
            return False

    return True


def filter_reviews(
    reviews: Iterable[CanonicalReview],
    criteria: FilterCriteria | None = None,
) -> list[CanonicalReview]:
    """Return the reviews matching every criterion, in their original order."""
    if criteria is None:
        return list(reviews)
    return [review for review in reviews if _matches(review, criteria)]
